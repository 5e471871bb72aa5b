"""Word and WORD motions.

Word motions work on the cursor's line. A line is a sequence of class runs
(word characters, punctuation, blanks); each step moves across runs and the
motion functions loop the step ``count`` times, each step clamping on its own.
"""

from __future__ import annotations

from ..text_shape import BLANK, char_class, is_whitespace, is_WORD_char
from ..types import LineSource, MotionResult, Position, Range
from .common import _normalize, _times


def word_forward(line: str, start: int) -> int:
    """Start of the next word: leave the current run, then skip blanks."""
    pos = start
    if pos < len(line) and not is_whitespace(line[pos]):
        cls = char_class(line[pos])
        while pos < len(line) and char_class(line[pos]) == cls:
            pos += 1
    while pos < len(line) and is_whitespace(line[pos]):
        pos += 1
    return pos


def word_backward(line: str, start: int) -> int:
    """Start of the current or previous word."""
    pos = min(start, len(line)) - 1
    while pos >= 0 and is_whitespace(line[pos]):
        pos -= 1
    if pos < 0:
        return 0
    cls = char_class(line[pos])
    while pos > 0 and char_class(line[pos - 1]) == cls:
        pos -= 1
    return pos


def word_end(line: str, start: int) -> int:
    """Last character of the current or next word (may equal len(line))."""
    pos = start + 1
    while pos < len(line) and is_whitespace(line[pos]):
        pos += 1
    if pos >= len(line):
        return pos
    cls = char_class(line[pos])
    while pos + 1 < len(line) and char_class(line[pos + 1]) == cls:
        pos += 1
    return pos


def WORD_forward(line: str, start: int) -> int:
    pos = start
    while pos < len(line) and is_WORD_char(line[pos]):
        pos += 1
    while pos < len(line) and is_whitespace(line[pos]):
        pos += 1
    return pos


def WORD_backward(line: str, start: int) -> int:
    pos = min(start, len(line)) - 1
    while pos >= 0 and is_whitespace(line[pos]):
        pos -= 1
    while pos > 0 and is_WORD_char(line[pos - 1]):
        pos -= 1
    return max(0, pos)


def WORD_end(line: str, start: int) -> int:
    pos = start + 1
    while pos < len(line) and is_whitespace(line[pos]):
        pos += 1
    while pos + 1 < len(line) and is_WORD_char(line[pos + 1]):
        pos += 1
    return pos


def motion_word(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to start of next word (w)."""
    text, line, col = _normalize(source, pos)
    new_col = col
    for _ in range(_times(count)):
        new_col = word_forward(text, new_col)
    end = min(new_col, len(text))
    return MotionResult(
        position=Position(line, end),
        range=Range(Position(line, col), Position(line, end)),
    )


def motion_WORD(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to start of next WORD (W) - whitespace-separated."""
    text, line, col = _normalize(source, pos)
    new_col = col
    for _ in range(_times(count)):
        new_col = WORD_forward(text, new_col)
    return MotionResult(
        position=Position(line, new_col),
        range=Range(Position(line, col), Position(line, new_col)),
    )


def motion_word_back(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to start of previous word (b)."""
    text, line, col = _normalize(source, pos)
    new_col = col
    for _ in range(_times(count)):
        new_col = word_backward(text, new_col)
    return MotionResult(
        position=Position(line, new_col),
        range=Range(Position(line, new_col), Position(line, col)),
    )


def motion_WORD_back(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to start of previous WORD (B)."""
    text, line, col = _normalize(source, pos)
    new_col = col
    for _ in range(_times(count)):
        new_col = WORD_backward(text, new_col)
    return MotionResult(
        position=Position(line, new_col),
        range=Range(Position(line, new_col), Position(line, col)),
    )


def motion_word_end(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to end of current/next word (e). Inclusive for operators."""
    text, line, col = _normalize(source, pos)
    new_col = col
    for _ in range(_times(count)):
        new_col = word_end(text, new_col)
    return MotionResult(
        position=Position(line, new_col),
        range=Range(Position(line, col), Position(line, min(new_col + 1, len(text)))),
    )


def motion_WORD_end(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Move to end of current/next WORD (E)."""
    text, line, col = _normalize(source, pos)
    new_col = col
    for _ in range(_times(count)):
        new_col = WORD_end(text, new_col)
    return MotionResult(
        position=Position(line, new_col),
        range=Range(Position(line, col), Position(line, min(new_col + 1, len(text)))),
    )


def _run_end(line: str, start: int, same) -> int:
    """Last offset of the run containing ``start`` while ``same(ch)`` holds."""
    pos = start
    while pos + 1 < len(line) and same(line[pos + 1]):
        pos += 1
    return pos


def _change_target(source: LineSource, pos: Position, count: int | None, classify, step) -> MotionResult:
    text, line, col = _normalize(source, pos)
    if col >= len(text):
        return MotionResult(position=Position(line, col), range=Range(Position(line, col), Position(line, col)))
    cls = classify(text[col])
    new_col = _run_end(text, col, lambda ch: classify(ch) == cls)
    for _ in range(_times(count) - 1):
        new_col = step(text, new_col)
    return MotionResult(
        position=Position(line, new_col),
        range=Range(Position(line, col), Position(line, min(new_col + 1, len(text)))),
    )


def motion_change_word(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Target of cw on a non-blank: end of the current run, then word ends for extra counts."""
    return _change_target(source, pos, count, char_class, word_end)


def motion_change_WORD(
    source: LineSource, pos: Position, count: int | None = None, char: str | None = None
) -> MotionResult:
    """Target of cW on a non-blank."""
    return _change_target(source, pos, count, is_WORD_char, WORD_end)


def starts_on_blank(source: LineSource, pos: Position) -> bool:
    """True when the cursor sits on a blank or past the end of its line."""
    text, _line, col = _normalize(source, pos)
    return col >= len(text) or char_class(text[col]) == BLANK
