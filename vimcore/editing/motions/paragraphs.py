"""Paragraph motions ({ and })."""

from __future__ import annotations

from ..types import LineSource, MotionResult, Position, Range
from .common import _normalize, _times


def paragraph_forward(source: LineSource, start_line: int, count: int = 1) -> int:
    """Line of the count-th empty line below ``start_line``, else the last line."""
    total = source.line_count()
    line = start_line
    found = 0
    while found < count and line < total - 1:
        line += 1
        if len(source.line_at(line)) == 0:
            found += 1
    if found < count:
        line = total - 1
    return line


def paragraph_backward(source: LineSource, start_line: int, count: int = 1) -> int:
    """Line of the count-th empty line above ``start_line``, else the first line."""
    line = start_line
    found = 0
    while found < count and line > 0:
        line -= 1
        if len(source.line_at(line)) == 0:
            found += 1
    if found < count:
        line = 0
    return line


def motion_paragraph_forward(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to the next paragraph boundary (})."""
    _text, line, col = _normalize(source, pos)
    target = paragraph_forward(source, line, _times(count))
    end = Position(target, 0)
    if target == source.line_count() - 1:
        end = Position(target, len(source.line_at(target)))
    return MotionResult(
        position=Position(target, 0),
        range=Range(Position(line, col), end),
    )


def motion_paragraph_backward(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to the previous paragraph boundary ({)."""
    _text, line, col = _normalize(source, pos)
    target = paragraph_backward(source, line, _times(count))
    return MotionResult(
        position=Position(target, 0),
        range=Range(Position(target, 0), Position(line, col)),
    )
