"""Character search motions (f, F, t, T) and their repeats (;, ,)."""

from __future__ import annotations

from ..text_shape import NOT_FOUND, find_char_backward, find_char_forward
from ..types import LineSource, MotionResult, Position, Range
from .common import _normalize, _times

_REVERSED = {"f": "F", "F": "f", "t": "T", "T": "t"}


def reverse_direction(direction: str) -> str:
    """The opposite search key, used by the ',' repeat."""
    return _REVERSED[direction]


def char_search_pos(direction: str, line: str, col: int, target: str, count: int = 1) -> int:
    """Landing offset for a character search, or NOT_FOUND.

    ``t``/``T`` reuse the plain forward/backward scan and step back one
    cell from the match; an adjacent match is not skipped on repeat.
    """
    if direction == "f":
        return find_char_forward(line, col, target, count)
    if direction == "F":
        return find_char_backward(line, col, target, count)
    if direction == "t":
        pos = find_char_forward(line, col, target, count)
        return pos - 1 if pos != NOT_FOUND else NOT_FOUND
    if direction == "T":
        pos = find_char_backward(line, col, target, count)
        return pos + 1 if pos != NOT_FOUND else NOT_FOUND
    raise ValueError(f"unknown search direction: {direction!r}")


def char_motion_range(direction: str, col: int, pos: int) -> tuple[int, int] | None:
    """Operator span [start, end) for a search that landed on ``pos``.

    ``f``/``t`` include the landing cell, ``F`` includes the cursor cell and
    ``T`` stops before it. Empty spans yield None.
    """
    if direction in ("f", "t"):
        start, end = col, pos + 1
    elif direction == "F":
        start, end = pos, col + 1
    else:
        start, end = pos, col
    if end > start:
        return start, end
    return None


def _search(direction: str, source: LineSource, pos: Position, count: int | None, char: str | None) -> MotionResult | None:
    if not char:
        return None
    text, line, col = _normalize(source, pos)
    found = char_search_pos(direction, text, col, char, _times(count))
    if found == NOT_FOUND:
        return None
    span = char_motion_range(direction, col, found)
    return MotionResult(
        position=Position(line, found),
        range=Range(Position(line, span[0]), Position(line, span[1])) if span else None,
    )


def motion_find_char(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult | None:
    """Move to next occurrence of char (f{char})."""
    return _search("f", source, pos, count, char)


def motion_find_char_back(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult | None:
    """Move to previous occurrence of char (F{char})."""
    return _search("F", source, pos, count, char)


def motion_till_char(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult | None:
    """Move to just before next occurrence of char (t{char})."""
    return _search("t", source, pos, count, char)


def motion_till_char_back(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult | None:
    """Move to just after previous occurrence of char (T{char})."""
    return _search("T", source, pos, count, char)