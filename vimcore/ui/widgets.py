"""Textual widgets for modal editing."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.events import Key
from textual.message import Message
from textual.widgets import Static, TextArea
from textual.widgets.text_area import Selection

from ..clipboard import copy_to_system_clipboard
from ..editing.types import Position
from ..interpreter import ESCAPE, KeyInterpreter, Mode, Viewport, dispatch_key

log = logging.getLogger(__name__)


class TextAreaHost:
    """EditorHost backed by a Textual TextArea."""

    def __init__(self, text_area: TextArea) -> None:
        self.text_area = text_area

    def line_count(self) -> int:
        return self.text_area.document.line_count

    def line_at(self, index: int) -> str:
        if index < 0:
            raise IndexError(f"line index {index} out of range")
        return self.text_area.document.get_line(index)

    def cursor(self) -> Position:
        row, col = self.text_area.cursor_location
        return Position(row, col)

    def move_cursor(self, position: Position) -> None:
        self.text_area.cursor_location = (position.line, position.col)

    def set_selection(self, start: Position, end: Position) -> None:
        self.text_area.selection = Selection((start.line, start.col), (end.line, end.col))

    def replace_range(self, start: Position, end: Position, text: str) -> None:
        # One undo step per edit
        self.text_area.history.checkpoint()
        self.text_area.replace(text, (start.line, start.col), (end.line, end.col))

    def undo(self) -> None:
        self.text_area.undo()

    def copy_to_system_clipboard(self, text: str) -> None:
        # Prefer Textual's clipboard support (OSC52 where available).
        try:
            self.text_area.app.copy_to_clipboard(text)
            return
        except Exception:
            log.debug("Textual clipboard copy failed", exc_info=True)
        copy_to_system_clipboard(text)

    def visible_line_range(self) -> Viewport:
        last = self.line_count() - 1
        top = min(self.text_area.scroll_offset.y, last)
        height = max(self.text_area.size.height, 1)
        bottom = min(top + height - 1, last)
        return Viewport(top, (top + bottom) // 2, bottom)


class VimTextArea(TextArea):
    """TextArea whose keys run through a KeyInterpreter while vim mode is on.

    Outside insert mode the area is read-only, so keys the interpreter does not
    claim (arrows, page keys, app bindings) keep their TextArea behavior
    without editing the buffer.
    """

    class ModeChanged(Message):
        """Posted after a key changes the editing mode or vim is toggled."""

        def __init__(self, text_area: VimTextArea, mode: Mode, vim_enabled: bool) -> None:
            super().__init__()
            self.text_area = text_area
            self.mode = mode
            self.vim_enabled = vim_enabled

    _KEY_NORMALIZATION: dict[str, str] = {
        "ctrl+left_square_bracket": ESCAPE,
        "ctrl+c": ESCAPE,
    }

    def __init__(
        self,
        text: str = "",
        *,
        vim_enabled: bool = True,
        system_clipboard: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(text, **kwargs)
        self.interpreter = KeyInterpreter()
        self.host = TextAreaHost(self)
        self.vim_enabled = vim_enabled
        self.system_clipboard = system_clipboard
        self._sync_read_only()

    @property
    def mode(self) -> Mode:
        return self.interpreter.mode

    def toggle_vim(self) -> bool:
        """Switch the interpreter on or off. Returns the new state."""
        self.vim_enabled = not self.vim_enabled
        self.interpreter.reset()
        self._sync_read_only()
        self.post_message(self.ModeChanged(self, self.mode, self.vim_enabled))
        return self.vim_enabled

    def _sync_read_only(self) -> None:
        self.read_only = self.vim_enabled and self.interpreter.mode != Mode.INSERT

    def _vim_key(self, event: Key) -> str | None:
        """Interpreter key name for an event, or None for keys left to TextArea."""
        normalized = self._KEY_NORMALIZATION.get(event.key, event.key)
        if normalized == ESCAPE:
            return ESCAPE
        if event.is_printable and event.character and len(event.character) == 1:
            return event.character
        return None

    async def _on_key(self, event: Key) -> None:
        if not self.vim_enabled:
            await super()._on_key(event)
            return

        key = self._vim_key(event)
        if key is None:
            await super()._on_key(event)
            return

        previous = self.interpreter.mode
        result = dispatch_key(self.interpreter, self.host, key, clipboard=self.system_clipboard)
        self._sync_read_only()
        if result.mode != previous:
            self.post_message(self.ModeChanged(self, result.mode, self.vim_enabled))

        if result.consumed:
            event.prevent_default()
            event.stop()
            return
        await super()._on_key(event)


class ModeIndicator(Static):
    """Status line showing the current editing mode."""

    DEFAULT_CSS = """
    ModeIndicator {
        height: 1;
        dock: bottom;
    }
    """

    _STYLES: dict[Mode, str] = {
        Mode.NORMAL: "bold black on blue",
        Mode.INSERT: "bold black on green",
        Mode.VISUAL_CHAR: "bold black on magenta",
        Mode.VISUAL_LINE: "bold black on magenta",
    }

    label: Text = Text("")

    def set_mode(self, mode: Mode, vim_enabled: bool = True) -> None:
        self.label = self.render_mode(mode, vim_enabled)
        self.update(self.label)

    @classmethod
    def render_mode(cls, mode: Mode, vim_enabled: bool = True) -> Text:
        if not vim_enabled:
            return Text(" VIM OFF ", style="dim")
        text = Text(f" {mode.value} ", style=cls._STYLES[mode])
        text.append(" ")
        return text
