"""Bracket matching motion."""

from __future__ import annotations

from ..text_shape import flatten, offset_to_position, position_to_offset
from ..types import LineSource, MotionResult, Position, Range
from .common import _normalize

BRACKET_PAIRS = {
    "(": ")",
    ")": "(",
    "[": "]",
    "]": "[",
    "{": "}",
    "}": "{",
}
OPEN_BRACKETS = frozenset("([{")


def find_matching_bracket(text: str, offset: int) -> int | None:
    """Offset of the bracket matching the one at ``offset`` in ``text``."""
    ch = text[offset]
    target = BRACKET_PAIRS[ch]
    depth = 0
    step = 1 if ch in OPEN_BRACKETS else -1
    i = offset
    while 0 <= i < len(text):
        if text[i] == ch:
            depth += 1
        elif text[i] == target:
            depth -= 1
            if depth == 0:
                return i
        i += step
    return None


def matching_bracket(source: LineSource, pos: Position) -> Position | None:
    """Position of the bracket matching the first bracket at or after ``pos`` on its line."""
    text, line, col = _normalize(source, pos)
    for i in range(col, len(text)):
        if text[i] in BRACKET_PAIRS:
            bracket_col = i
            break
    else:
        return None

    flat, starts = flatten(source)
    found = find_matching_bracket(flat, position_to_offset(Position(line, bracket_col), starts))
    if found is None:
        return None
    return offset_to_position(found, starts)


def motion_matching_bracket(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult | None:
    """Move to matching bracket (%). Inclusive for operators."""
    _text, line, col = _normalize(source, pos)
    target = matching_bracket(source, pos)
    if target is None:
        return None
    start = Position(line, col)
    if target < start:
        span = Range(target, Position(line, col + 1))
    else:
        span = Range(start, Position(target.line, target.col + 1))
    return MotionResult(position=target, range=span)
