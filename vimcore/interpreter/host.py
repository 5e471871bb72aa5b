"""Host capability interface.

The interpreter never owns the document. A host exposes its buffer as a
LineSource and accepts cursor, selection and replace requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..editing.types import LineSource, Position

if TYPE_CHECKING:
    from .machine import KeyInterpreter
    from .state import Mode

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Visible line numbers used by H, M and L."""

    top: int
    middle: int
    bottom: int

    @classmethod
    def for_buffer(cls, source: LineSource) -> Viewport:
        """Fallback for hosts without scrolling: the whole buffer is visible."""
        last = source.line_count() - 1
        return cls(0, last // 2, last)


@runtime_checkable
class EditorHost(LineSource, Protocol):
    """What the interpreter needs from a text-editing surface."""

    def cursor(self) -> Position: ...

    def move_cursor(self, position: Position) -> None: ...

    def set_selection(self, start: Position, end: Position) -> None: ...

    def replace_range(self, start: Position, end: Position, text: str) -> None: ...

    def undo(self) -> None: ...

    def copy_to_system_clipboard(self, text: str) -> None: ...

    def visible_line_range(self) -> Viewport: ...


@dataclass(frozen=True)
class KeyResult:
    """Outcome of one key event.

    ``consumed`` is False only for keys the host should handle itself
    (text typed in insert mode). ``clipboard`` carries register text the host
    integration layer mirrors to the system clipboard.
    """

    consumed: bool
    mode: Mode
    clipboard: str | None = None


def dispatch_key(interpreter: KeyInterpreter, host: EditorHost, key: str, *, clipboard: bool = True) -> KeyResult:
    """Feed one key to the interpreter, then perform the clipboard side effect."""
    result = interpreter.handle_key(key, host)
    if clipboard and result.clipboard is not None:
        try:
            host.copy_to_system_clipboard(result.clipboard)
        except Exception:
            log.debug("Clipboard write failed", exc_info=True)
    return result
