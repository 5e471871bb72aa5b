"""Sentence motions (( and )).

A sentence ends at '.', '!' or '?' (optionally followed by closing quotes or
brackets) that is followed by whitespace or the end of the line. Empty lines
are sentence boundaries of their own.
"""

from __future__ import annotations

from ..text_shape import first_non_blank, is_whitespace
from ..types import LineSource, MotionResult, Position, Range
from .common import _normalize, _times

SENTENCE_END = frozenset(".!?")
SENTENCE_CLOSERS = frozenset(")]\"'")


def sentence_end_after(line: str, start: int) -> int:
    """Offset one past the terminator of the sentence containing ``start``, or len(line)."""
    i = start
    while i < len(line):
        if line[i] in SENTENCE_END:
            j = i + 1
            while j < len(line) and (line[j] in SENTENCE_END or line[j] in SENTENCE_CLOSERS):
                j += 1
            if j >= len(line) or is_whitespace(line[j]):
                return j
            i = j
            continue
        i += 1
    return len(line)


def sentence_starts(line: str) -> list[int]:
    """Offsets at which sentences begin on ``line``."""
    starts: list[int] = []
    pos = first_non_blank(line)
    while pos < len(line):
        starts.append(pos)
        end = sentence_end_after(line, pos)
        pos = end
        while pos < len(line) and is_whitespace(line[pos]):
            pos += 1
    return starts


def _next_start(source: LineSource, line: int, col: int) -> Position:
    text = source.line_at(line)
    for start in sentence_starts(text):
        if start > col:
            return Position(line, start)
    if line < source.line_count() - 1:
        below = sentence_starts(source.line_at(line + 1))
        return Position(line + 1, below[0] if below else 0)
    return Position(line, len(text))


def _previous_start(source: LineSource, line: int, col: int) -> Position:
    for start in reversed(sentence_starts(source.line_at(line))):
        if start < col:
            return Position(line, start)
    if line > 0:
        above = sentence_starts(source.line_at(line - 1))
        return Position(line - 1, above[-1] if above else 0)
    return Position(0, 0)


def motion_sentence_forward(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to the start of the next sentence ())."""
    _text, line, col = _normalize(source, pos)
    target = Position(line, col)
    for _ in range(_times(count)):
        target = _next_start(source, target.line, target.col)
    return MotionResult(position=target, range=Range(Position(line, col), target))


def motion_sentence_backward(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to the start of the current or previous sentence (()."""
    _text, line, col = _normalize(source, pos)
    target = Position(line, col)
    for _ in range(_times(count)):
        target = _previous_start(source, target.line, target.col)
    return MotionResult(position=target, range=Range(target, Position(line, col)))
