"""Editing commands that are not operator + motion pairs.

Like the operators, these read a snapshot and return an OperatorResult
describing the edits; the interpreter sends the edits to the host.
"""

from __future__ import annotations

from .text_shape import clamp_col, is_whitespace
from .types import Edit, LineSource, OperatorResult, Position, Register


def put_after(source: LineSource, pos: Position, register: Register, count: int = 1) -> OperatorResult:
    """Paste after the cursor (p): after the cursor cell, or below the line."""
    text = source.line_at(pos.line)
    if register.linewise:
        insert = "\n" + "\n".join(register.lines * count)
        at = Position(pos.line, len(text))
        return OperatorResult(cursor=Position(pos.line + 1, 0), edits=[Edit(at, at, insert)])
    col = min(pos.col + 1, len(text))
    at = Position(pos.line, col)
    return OperatorResult(cursor=at, edits=[Edit(at, at, register.text * count)])


def put_before(source: LineSource, pos: Position, register: Register, count: int = 1) -> OperatorResult:
    """Paste before the cursor (P): at the cursor cell, or above the line."""
    if register.linewise:
        insert = "\n".join(register.lines * count) + "\n"
        at = Position(pos.line, 0)
        return OperatorResult(cursor=at, edits=[Edit(at, at, insert)])
    at = Position(pos.line, min(pos.col, len(source.line_at(pos.line))))
    return OperatorResult(cursor=at, edits=[Edit(at, at, register.text * count)])


def join_lines(source: LineSource, line: int, count: int = 1) -> OperatorResult | None:
    """Join ``max(count, 2)`` lines starting at ``line`` (J)."""
    last = min(line + max(count, 2) - 1, source.line_count() - 1)
    if last == line:
        return None

    head = source.line_at(line)
    joined = head
    cursor_col = len(head)
    for i in range(line + 1, last + 1):
        stripped = source.line_at(i).lstrip()
        if not stripped or not joined or is_whitespace(joined[-1]) or stripped.startswith(")"):
            sep = ""
        else:
            sep = " "
        cursor_col = len(joined)
        joined += sep + stripped

    end = Position(last, len(source.line_at(last)))
    return OperatorResult(
        cursor=Position(line, clamp_col(cursor_col, joined)),
        edits=[Edit(Position(line, len(head)), end, joined[len(head) :])],
    )


def toggle_case(source: LineSource, pos: Position, count: int = 1) -> OperatorResult | None:
    """Switch case of ``count`` characters and advance past them (~)."""
    text = source.line_at(pos.line)
    if not text or pos.col >= len(text):
        return None
    end = min(pos.col + count, len(text))
    return OperatorResult(
        cursor=Position(pos.line, clamp_col(end, text)),
        edits=[Edit(pos, Position(pos.line, end), text[pos.col : end].swapcase())],
    )


def replace_chars(source: LineSource, pos: Position, char: str, count: int = 1) -> OperatorResult | None:
    """Replace ``count`` characters under the cursor with ``char`` (r)."""
    text = source.line_at(pos.line)
    if pos.col + count > len(text):
        return None
    return OperatorResult(
        cursor=Position(pos.line, pos.col + count - 1),
        edits=[Edit(pos, Position(pos.line, pos.col + count), char * count)],
    )


def open_line_below(source: LineSource, line: int) -> OperatorResult:
    """Open a new line below and enter insert mode (o)."""
    at = Position(line, len(source.line_at(line)))
    return OperatorResult(cursor=Position(line + 1, 0), edits=[Edit(at, at, "\n")], enter_insert=True)


def open_line_above(source: LineSource, line: int) -> OperatorResult:
    """Open a new line above and enter insert mode (O)."""
    at = Position(line, 0)
    return OperatorResult(cursor=at, edits=[Edit(at, at, "\n")], enter_insert=True)
