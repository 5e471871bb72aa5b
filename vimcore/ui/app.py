"""Standalone modal editor application."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding

from ..config import save_settings
from ..stores.settings import EditorSettings
from .widgets import ModeIndicator, VimTextArea

log = logging.getLogger(__name__)


class ModalEditorApp(App):
    """Edit one file in a VimTextArea with a mode line."""

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+t", "toggle_vim", "Toggle vim", priority=True),
    ]

    CSS = """
    #editor {
        height: 1fr;
        border: none;
    }
    """

    def __init__(
        self,
        path: Path | None = None,
        settings: EditorSettings | None = None,
        persist_settings: bool = True,
    ):
        super().__init__()
        self.path = path
        self.settings = settings or EditorSettings()
        self.persist_settings = persist_settings

    def _initial_text(self) -> str:
        if self.path is None or not self.path.exists():
            return ""
        return self.path.read_text(encoding="utf-8")

    def compose(self) -> ComposeResult:
        yield VimTextArea(
            self._initial_text(),
            id="editor",
            vim_enabled=self.settings.vim_enabled,
            system_clipboard=self.settings.system_clipboard,
        )
        indicator = ModeIndicator(id="mode")
        indicator.display = self.settings.show_mode
        yield indicator

    @property
    def editor(self) -> VimTextArea:
        return self.query_one("#editor", VimTextArea)

    def on_mount(self) -> None:
        if self.path is not None:
            self.title = str(self.path)
        editor = self.editor
        editor.focus()
        self.query_one("#mode", ModeIndicator).set_mode(editor.mode, editor.vim_enabled)

    def on_vim_text_area_mode_changed(self, message: VimTextArea.ModeChanged) -> None:
        self.query_one("#mode", ModeIndicator).set_mode(message.mode, message.vim_enabled)

    def action_save(self) -> None:
        if self.path is None:
            self.notify("No file to save", severity="warning")
            return
        try:
            self.path.write_text(self.editor.text, encoding="utf-8")
        except OSError as exc:
            self.notify(f"Save failed: {exc}", severity="error")
            return
        self.notify(f"Saved {self.path}")

    def action_toggle_vim(self) -> None:
        self.settings.vim_enabled = self.editor.toggle_vim()
        if not self.persist_settings:
            return
        try:
            save_settings(self.settings)
        except OSError:
            log.debug("Could not persist settings", exc_info=True)
