"""Character classification and line scanning helpers."""

from __future__ import annotations

from .types import LineSource, Position

# Character classes used by word motions and word text objects.
BLANK = 0
WORD = 1
PUNCT = 2

NOT_FOUND = -1


def is_word_char(ch: str) -> bool:
    """Check if character is a word character (vim 'word')."""
    return ch.isalnum() or ch == "_"


def is_whitespace(ch: str) -> bool:
    return ch.isspace()


def is_WORD_char(ch: str) -> bool:
    """Check if character is a WORD character (non-whitespace)."""
    return not ch.isspace()


def char_class(ch: str) -> int:
    """Classify a character as BLANK, WORD or PUNCT."""
    if is_whitespace(ch):
        return BLANK
    if is_word_char(ch):
        return WORD
    return PUNCT


def first_non_blank(line: str) -> int:
    """Offset of the first non-whitespace character, or len(line) if none."""
    i = 0
    while i < len(line) and is_whitespace(line[i]):
        i += 1
    return i


def find_char_forward(line: str, start: int, target: str, count: int = 1) -> int:
    """Offset of the count-th ``target`` strictly after ``start``, or NOT_FOUND."""
    found = 0
    for i in range(start + 1, len(line)):
        if line[i] == target:
            found += 1
            if found == count:
                return i
    return NOT_FOUND


def find_char_backward(line: str, start: int, target: str, count: int = 1) -> int:
    """Offset of the count-th ``target`` strictly before ``start``, or NOT_FOUND."""
    found = 0
    for i in range(min(start, len(line)) - 1, -1, -1):
        if line[i] == target:
            found += 1
            if found == count:
                return i
    return NOT_FOUND


def clamp_line(line: int, source: LineSource) -> int:
    return max(0, min(line, source.line_count() - 1))


def clamp_col(col: int, line: str) -> int:
    """Clamp a column to a normal-mode cursor cell: [0, len-1], 0 when empty."""
    return max(0, min(col, len(line) - 1))


def clamp_position(pos: Position, source: LineSource) -> Position:
    line = clamp_line(pos.line, source)
    return Position(line, clamp_col(pos.col, source.line_at(line)))


def get_text_in_range(source: LineSource, start: Position, end: Position) -> str:
    """Text between two positions, joining lines with newlines."""
    if start.line == end.line:
        return source.line_at(start.line)[start.col : end.col]
    parts = [source.line_at(start.line)[start.col :]]
    for i in range(start.line + 1, end.line):
        parts.append(source.line_at(i))
    parts.append(source.line_at(end.line)[: end.col])
    return "\n".join(parts)


def get_lines(source: LineSource, top: int, bottom: int) -> list[str]:
    return [source.line_at(i) for i in range(top, bottom + 1)]


def flatten(source: LineSource) -> tuple[str, list[int]]:
    """Join the buffer into one string and return it with each line's start offset."""
    starts: list[int] = []
    parts: list[str] = []
    offset = 0
    for i in range(source.line_count()):
        line = source.line_at(i)
        starts.append(offset)
        parts.append(line)
        offset += len(line) + 1
    return "\n".join(parts), starts


def position_to_offset(pos: Position, starts: list[int]) -> int:
    return starts[pos.line] + pos.col


def offset_to_position(offset: int, starts: list[int]) -> Position:
    """Map a flattened offset back to (line, col)."""
    lo, hi = 0, len(starts) - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if starts[mid] <= offset:
            lo = mid
        else:
            hi = mid - 1
    return Position(lo, offset - starts[lo])
