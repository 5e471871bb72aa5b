"""Operator functions (d, c, y) applied to motion ranges.

Operators are pure: they read a buffer snapshot and describe the edits, the
register content and the resulting cursor. Empty ranges return None so the
caller performs no edit and leaves the register untouched.
"""

from __future__ import annotations

from collections.abc import Callable

from .text_shape import clamp_col, get_lines, get_text_in_range
from .types import Edit, LineSource, OperatorResult, Position, Range, Register

OperatorFunc = Callable[[LineSource, Range], "OperatorResult | None"]


def _line_bounds(source: LineSource, range_obj: Range) -> tuple[int, int]:
    last = source.line_count() - 1
    top = max(0, min(range_obj.start.line, last))
    bottom = max(top, min(range_obj.end.line, last))
    return top, bottom


def _linewise_delete(source: LineSource, range_obj: Range) -> OperatorResult:
    top, bottom = _line_bounds(source, range_obj)
    hint = range_obj.start.col
    total = source.line_count()
    register = Register.from_lines(get_lines(source, top, bottom))

    if bottom < total - 1:
        edit = Edit(Position(top, 0), Position(bottom + 1, 0))
        cursor = Position(top, clamp_col(hint, source.line_at(bottom + 1)))
    elif top > 0:
        # Last line: pull from the end of the previous line instead of leaving an empty line
        prev = source.line_at(top - 1)
        edit = Edit(Position(top - 1, len(prev)), Position(bottom, len(source.line_at(bottom))))
        cursor = Position(top - 1, clamp_col(hint, prev))
    else:
        # Every line goes: clear in place, the buffer keeps one line
        edit = Edit(Position(0, 0), Position(bottom, len(source.line_at(bottom))))
        cursor = Position(0, 0)
    return OperatorResult(cursor=cursor, edits=[edit], register=register)


def operator_delete(source: LineSource, range_obj: Range) -> OperatorResult | None:
    """Delete text in range (d operator)."""
    if range_obj.is_empty:
        return None
    if range_obj.linewise:
        return _linewise_delete(source, range_obj)

    start, end = range_obj.start, range_obj.end
    deleted = get_text_in_range(source, start, end)
    remaining = source.line_at(start.line)[: start.col] + source.line_at(end.line)[end.col :]
    return OperatorResult(
        cursor=Position(start.line, clamp_col(start.col, remaining)),
        edits=[Edit(start, end)],
        register=Register(deleted),
    )


def operator_change(source: LineSource, range_obj: Range) -> OperatorResult | None:
    """Delete text in range and enter insert mode (c operator).

    Linewise changes empty each line in place so the line count is kept.
    """
    if range_obj.is_empty:
        return None
    if range_obj.linewise:
        top, bottom = _line_bounds(source, range_obj)
        lines = get_lines(source, top, bottom)
        edit = Edit(Position(top, 0), Position(bottom, len(lines[-1])), "\n" * (bottom - top))
        return OperatorResult(
            cursor=Position(top, 0),
            edits=[edit],
            register=Register.from_lines(lines),
            enter_insert=True,
        )

    start, end = range_obj.start, range_obj.end
    return OperatorResult(
        cursor=start,
        edits=[Edit(start, end)],
        register=Register(get_text_in_range(source, start, end)),
        enter_insert=True,
    )


def operator_yank(source: LineSource, range_obj: Range) -> OperatorResult | None:
    """Copy text in range to the register (y operator)."""
    if range_obj.is_empty:
        return None
    if range_obj.linewise:
        top, bottom = _line_bounds(source, range_obj)
        return OperatorResult(
            cursor=Position(top, clamp_col(range_obj.start.col, source.line_at(top))),
            register=Register.from_lines(get_lines(source, top, bottom)),
        )
    return OperatorResult(
        cursor=range_obj.start,
        register=Register(get_text_in_range(source, range_obj.start, range_obj.end)),
    )


# Operator registry
OPERATORS: dict[str, OperatorFunc] = {
    "d": operator_delete,
    "c": operator_change,
    "y": operator_yank,
}


def apply_operator(operator: str, source: LineSource, range_obj: Range) -> OperatorResult | None:
    """Run the operator bound to ``operator`` over ``range_obj``."""
    try:
        func = OPERATORS[operator]
    except KeyError:
        raise ValueError(f"unknown operator: {operator!r}") from None
    return func(source, range_obj)
