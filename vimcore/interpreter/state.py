"""Interpreter session state.

Everything the interpreter remembers between keys lives in one SessionState
owned by a KeyInterpreter: mode, pending input, register, marks, desired
column and the last character search.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from ..editing.selection import VisualSelection
from ..editing.types import Position, Register


class Mode(Enum):
    """Vim editing modes."""

    NORMAL = "NORMAL"
    INSERT = "INSERT"
    VISUAL_CHAR = "VISUAL"
    VISUAL_LINE = "VISUAL LINE"

    @property
    def is_visual(self) -> bool:
        return self in (Mode.VISUAL_CHAR, Mode.VISUAL_LINE)


class Operator(str, Enum):
    """Operators that wait for a motion or text object."""

    DELETE = "d"
    CHANGE = "c"
    YANK = "y"


# Prefix keys that wait for one more key
FIND_PREFIXES = frozenset("fFtT")
MARK_JUMP_PREFIXES = frozenset("'`")
TEXT_OBJECT_PREFIXES = frozenset("ia")
REPLACE_PREFIX = "r"
MARK_SET_PREFIX = "m"
GO_PREFIX = "g"


@dataclass(frozen=True)
class Idle:
    """No partial input."""


@dataclass(frozen=True)
class AwaitingPrefix:
    """A motion-introducing key waits for its argument (f, ', g, r, m, ...)."""

    prefix: str


@dataclass(frozen=True)
class AwaitingOperatorTarget:
    """An operator waits for a motion or text object."""

    operator: Operator


@dataclass(frozen=True)
class AwaitingOperatorPrefix:
    """An operator and a nested prefix wait for one more key (df, ci, ya, ...)."""

    operator: Operator
    prefix: str


PendingState = Union[Idle, AwaitingPrefix, AwaitingOperatorTarget, AwaitingOperatorPrefix]

IDLE = Idle()


@dataclass(frozen=True)
class CharSearch:
    """The last f/F/t/T invocation, replayed by ; and ,."""

    direction: str
    char: str


@dataclass
class SessionState:
    """All interpreter state for one editing session."""

    mode: Mode = Mode.NORMAL
    pending: PendingState = IDLE
    count_buffer: str = ""
    operator_count: int | None = None
    register: Register | None = None
    marks: dict[str, Position] = field(default_factory=dict)
    desired_column: int | None = None
    last_search: CharSearch | None = None
    visual: VisualSelection | None = None

    def take_count(self) -> int | None:
        """Parse and clear the count buffer, folding in an operator's count."""
        count = int(self.count_buffer) if self.count_buffer else None
        self.count_buffer = ""
        if self.operator_count is not None:
            count = self.operator_count * (count or 1)
            self.operator_count = None
        return count

    def clear_pending(self) -> None:
        self.pending = IDLE
        self.count_buffer = ""
        self.operator_count = None
