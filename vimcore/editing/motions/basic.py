"""Basic cursor motions."""

from __future__ import annotations

from ..types import LineSource, MotionResult, MotionType, Position, Range
from .common import _normalize, _times


def motion_left(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move cursor left (h)."""
    _text, line, col = _normalize(source, pos)
    new_col = col
    for _ in range(_times(count)):
        new_col = max(0, new_col - 1)
    return MotionResult(
        position=Position(line, new_col),
        range=Range(Position(line, new_col), Position(line, col)),
    )


def motion_right(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move cursor right (l)."""
    text, line, col = _normalize(source, pos)
    new_col = col
    for _ in range(_times(count)):
        new_col = min(new_col + 1, len(text))
    return MotionResult(
        position=Position(line, new_col),
        range=Range(Position(line, col), Position(line, new_col)),
    )


def motion_down(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult | None:
    """Move cursor down (j).

    ``pos.col`` is taken as the desired column and is clamped to the target
    line only. Returns None when already on the last line.
    """
    line = max(0, min(pos.line, source.line_count() - 1))
    new_line = line
    for _ in range(_times(count)):
        new_line = min(new_line + 1, source.line_count() - 1)
    if new_line == line:
        return None
    return MotionResult(
        position=Position(new_line, min(pos.col, len(source.line_at(new_line)))),
        range=Range(
            Position(line, pos.col),
            Position(new_line, 0),
            MotionType.LINEWISE,
        ),
    )


def motion_up(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult | None:
    """Move cursor up (k). Returns None when already on the first line."""
    line = max(0, min(pos.line, source.line_count() - 1))
    new_line = line
    for _ in range(_times(count)):
        new_line = max(0, new_line - 1)
    if new_line == line:
        return None
    new_col = min(pos.col, len(source.line_at(new_line)))
    return MotionResult(
        position=Position(new_line, new_col),
        range=Range(
            Position(new_line, new_col),
            Position(line, 0),
            MotionType.LINEWISE,
        ),
    )
