"""Line-relative and line-jump motions."""

from __future__ import annotations

from ..text_shape import first_non_blank
from ..types import LineSource, MotionResult, MotionType, Position, Range
from .common import _normalize


def motion_line_start(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to start of line (0)."""
    _text, line, col = _normalize(source, pos)
    return MotionResult(
        position=Position(line, 0),
        range=Range(Position(line, 0), Position(line, col)),
    )


def motion_first_non_blank(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to first non-blank character (^).

    The range is ordered whichever side of the first non-blank the cursor is on.
    """
    text, line, col = _normalize(source, pos)
    fnb = first_non_blank(text)
    return MotionResult(
        position=Position(line, fnb),
        range=Range(Position(line, min(col, fnb)), Position(line, max(col, fnb))),
    )


def motion_line_end(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to end of line ($)."""
    text, line, col = _normalize(source, pos)
    end_col = len(text)
    return MotionResult(
        position=Position(line, end_col),
        range=Range(Position(line, col), Position(line, end_col)),
    )


def motion_goto_line(
    source: LineSource, pos: Position, target: int, col: int | None = None
) -> MotionResult:
    """Jump to ``target`` (clamped). Linewise for operators.

    ``col`` is the landing column; None lands on the first non-blank.
    """
    _text, line, cur_col = _normalize(source, pos)
    target = max(0, min(target, source.line_count() - 1))
    target_text = source.line_at(target)
    land = first_non_blank(target_text) if col is None else min(col, len(target_text))
    if target >= line:
        start, end = Position(line, cur_col), Position(target, 0)
    else:
        start, end = Position(target, land), Position(line, 0)
    return MotionResult(
        position=Position(target, land),
        range=Range(start, end, MotionType.LINEWISE),
    )


def motion_last_line(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to last line (G), or to line ``count`` when a count is given."""
    target = count - 1 if count else source.line_count() - 1
    return motion_goto_line(source, pos, target, col=0)


def motion_first_line(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to first line (gg), or to line ``count`` when a count is given."""
    target = count - 1 if count else 0
    return motion_goto_line(source, pos, target, col=0)


def motion_current_line(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Operate on ``count`` lines from the cursor (dd, yy, cc)."""
    _text, line, col = _normalize(source, pos)
    last = min(line + (count or 1) - 1, source.line_count() - 1)
    return MotionResult(
        position=Position(line, col),
        range=Range(Position(line, col), Position(last, 0), MotionType.LINEWISE),
    )


def motion_jump(source: LineSource, pos: Position, target: Position) -> MotionResult:
    """Jump to an exact position (`{mark}). Charwise exclusive for operators."""
    _text, line, col = _normalize(source, pos)
    _target_text, target_line, target_col = _normalize(source, target)
    here = Position(line, col)
    there = Position(target_line, target_col)
    return MotionResult(
        position=there,
        range=Range(min(here, there), max(here, there)),
    )
