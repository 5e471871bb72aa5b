"""Core types for the vim motion engine."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol, Union, runtime_checkable


class MotionType(Enum):
    """How a range is interpreted by operators."""

    CHARWISE = auto()
    LINEWISE = auto()


@dataclass(frozen=True, order=True)
class Position:
    """A (line, col) location in a buffer.

    ``col`` may equal the line length (end of line).
    """

    line: int
    col: int


@dataclass(frozen=True)
class Range:
    """A span between two positions.

    Charwise ranges are end-exclusive: inclusive motions already count their
    last character into ``end``. Linewise ranges cover every line from
    ``start.line`` to ``end.line``; their columns are only a cursor hint.
    """

    start: Position
    end: Position
    motion_type: MotionType = MotionType.CHARWISE

    @property
    def linewise(self) -> bool:
        return self.motion_type == MotionType.LINEWISE

    @property
    def is_empty(self) -> bool:
        if self.linewise:
            return self.end.line < self.start.line
        return self.end <= self.start


@dataclass(frozen=True)
class MotionResult:
    """Result of a motion: where the cursor goes and what an operator covers."""

    position: Position
    range: Range | None = None


@dataclass(frozen=True)
class Register:
    """The unnamed register: a charwise string or a list of whole lines."""

    value: Union[str, tuple[str, ...]]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> Register:
        return cls(tuple(lines))

    @property
    def linewise(self) -> bool:
        return isinstance(self.value, tuple)

    @property
    def lines(self) -> list[str]:
        if isinstance(self.value, tuple):
            return list(self.value)
        return self.value.split("\n")

    @property
    def text(self) -> str:
        """Plain-text form, as mirrored to the system clipboard."""
        if isinstance(self.value, tuple):
            return "\n".join(self.value)
        return self.value


@dataclass(frozen=True)
class Edit:
    """A single replace request for the host: text substituted for [start, end)."""

    start: Position
    end: Position
    text: str = ""


@dataclass
class OperatorResult:
    """Outcome of an edit command, applied by the interpreter through the host."""

    cursor: Position
    edits: list[Edit] = field(default_factory=list)
    register: Register | None = None
    enter_insert: bool = False


@runtime_checkable
class LineSource(Protocol):
    """Read-only line access to a buffer snapshot."""

    def line_count(self) -> int: ...

    def line_at(self, index: int) -> str: ...


class LinesSnapshot:
    """A LineSource backed by a list of strings."""

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = list(lines) or [""]

    @classmethod
    def from_text(cls, text: str) -> LinesSnapshot:
        return cls(text.split("\n"))

    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> str:
        if index < 0:
            raise IndexError(f"line index out of range: {index}")
        return self._lines[index]

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)


# Motion function signature: (source, position, count, char) -> MotionResult | None
MotionFunc = Callable[[LineSource, Position, "int | None", "str | None"], "MotionResult | None"]
