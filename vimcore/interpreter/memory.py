"""In-memory EditorHost used for headless editing and tests."""

from __future__ import annotations

from collections.abc import Sequence

from ..editing.types import Position
from .host import Viewport


class MemoryHost:
    """A list of lines with a cursor, a selection and snapshot undo.

    Every replace_range pushes the previous buffer and cursor onto the undo
    stack, so ``u`` reverts one edit at a time.
    """

    def __init__(self, lines: Sequence[str] | None = None, cursor: Position | None = None) -> None:
        self.lines: list[str] = list(lines) if lines else [""]
        self._cursor = cursor or Position(0, 0)
        self.selection: tuple[Position, Position] | None = None
        self.clipboard: list[str] = []
        self.viewport: Viewport | None = None
        self._undo_stack: list[tuple[list[str], Position]] = []

    @classmethod
    def from_text(cls, text: str, cursor: Position | None = None) -> MemoryHost:
        return cls(text.split("\n"), cursor)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    # LineSource

    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        if index < 0:
            raise IndexError(f"line index {index} out of range")
        return self.lines[index]

    # EditorHost

    def cursor(self) -> Position:
        return self._cursor

    def move_cursor(self, position: Position) -> None:
        self._cursor = position
        self.selection = None

    def set_selection(self, start: Position, end: Position) -> None:
        self.selection = (start, end)

    def replace_range(self, start: Position, end: Position, text: str) -> None:
        self._undo_stack.append((list(self.lines), self._cursor))
        head = self.lines[start.line][: start.col]
        tail = self.lines[end.line][end.col :] if end.line < len(self.lines) else ""
        inserted = (head + text + tail).split("\n")
        self.lines[start.line : end.line + 1] = inserted

    def undo(self) -> None:
        if not self._undo_stack:
            return
        self.lines, self._cursor = self._undo_stack.pop()

    def copy_to_system_clipboard(self, text: str) -> None:
        self.clipboard.append(text)

    def visible_line_range(self) -> Viewport:
        return self.viewport or Viewport.for_buffer(self)
