"""Text object functions for vim-style selection.

Text objects define regions of text for operators.
'i' prefix = inside (excluding delimiters or surrounding blanks)
'a' prefix = around (including delimiters or one adjacent blank run)

Every function returns an end-exclusive Range, or None when the cursor is not
inside such an object.
"""

from __future__ import annotations

from .motions.brackets import BRACKET_PAIRS, OPEN_BRACKETS
from .motions.common import _normalize
from .motions.sentences import sentence_end_after, sentence_starts
from .text_shape import (
    BLANK,
    char_class,
    first_non_blank,
    flatten,
    is_whitespace,
    offset_to_position,
    position_to_offset,
)
from .types import LineSource, MotionType, Position, Range


def _run_bounds(line: str, col: int, same) -> tuple[int, int]:
    """Expand [col, col+1) in both directions while ``same(ch)`` holds."""
    start, end = col, col + 1
    while start > 0 and same(line[start - 1]):
        start -= 1
    while end < len(line) and same(line[end]):
        end += 1
    return start, end


def _swallow_blanks(line: str, start: int, end: int) -> tuple[int, int]:
    """Outer rule: take the trailing blank run, else the leading one."""
    if end < len(line) and is_whitespace(line[end]):
        while end < len(line) and is_whitespace(line[end]):
            end += 1
    elif start > 0 and is_whitespace(line[start - 1]):
        while start > 0 and is_whitespace(line[start - 1]):
            start -= 1
    return start, end


# ============================================================================
# Word text objects: iw, aw, iW, aW
# ============================================================================


def _word_object(line: str, col: int, around: bool, classify) -> tuple[int, int] | None:
    if not line or col >= len(line):
        return None
    cls = classify(line[col])
    start, end = _run_bounds(line, col, lambda ch: classify(ch) == cls)
    if not around:
        return start, end
    if cls == BLANK:
        if end < len(line):
            next_cls = classify(line[end])
            while end < len(line) and classify(line[end]) == next_cls:
                end += 1
        elif start > 0:
            prev_cls = classify(line[start - 1])
            while start > 0 and classify(line[start - 1]) == prev_cls:
                start -= 1
        return start, end
    return _swallow_blanks(line, start, end)


def _WORD_class(ch: str) -> int:
    return BLANK if is_whitespace(ch) else 1


def text_object_word(source: LineSource, pos: Position, around: bool = False) -> Range | None:
    """Select the class run under the cursor (iw/aw)."""
    text, line, col = _normalize(source, pos)
    span = _word_object(text, col, around, char_class)
    if span is None:
        return None
    return Range(Position(line, span[0]), Position(line, span[1]))


def text_object_WORD(source: LineSource, pos: Position, around: bool = False) -> Range | None:
    """Select the WORD under the cursor (iW/aW)."""
    text, line, col = _normalize(source, pos)
    span = _word_object(text, col, around, _WORD_class)
    if span is None:
        return None
    return Range(Position(line, span[0]), Position(line, span[1]))


# ============================================================================
# Quote text objects: i", a", i', a', i`, a`
# ============================================================================


def text_object_quote(
    source: LineSource, pos: Position, around: bool = False, quote: str = '"'
) -> Range | None:
    """Select between the first two ``quote`` characters of the line.

    The cursor must lie on or between them.
    """
    text, line, col = _normalize(source, pos)
    first = text.find(quote)
    if first == -1:
        return None
    second = text.find(quote, first + 1)
    if second == -1:
        return None
    if col < first or col > second:
        return None
    if around:
        return Range(Position(line, first), Position(line, second + 1))
    return Range(Position(line, first + 1), Position(line, second))


# ============================================================================
# Bracket text objects: i(, a(, i[, a[, i{, a{, i<, a<
# ============================================================================

_OBJECT_BRACKETS = {**BRACKET_PAIRS, "<": ">", ">": "<"}


def text_object_bracket(
    source: LineSource, pos: Position, around: bool = False, bracket: str = "("
) -> Range | None:
    """Select the innermost enclosing bracket pair (may span lines)."""
    _text, line, col = _normalize(source, pos)
    open_bracket = bracket if bracket in OPEN_BRACKETS or bracket == "<" else _OBJECT_BRACKETS[bracket]
    close_bracket = _OBJECT_BRACKETS[open_bracket]

    flat, starts = flatten(source)
    cursor = position_to_offset(Position(line, col), starts)

    depth = 0
    open_pos = -1
    for i in range(min(cursor, len(flat) - 1), -1, -1):
        if flat[i] == close_bracket and i != cursor:
            depth += 1
        elif flat[i] == open_bracket:
            if depth == 0:
                open_pos = i
                break
            depth -= 1
    if open_pos == -1:
        return None

    depth = 0
    close_pos = -1
    for i in range(open_pos + 1, len(flat)):
        if flat[i] == open_bracket:
            depth += 1
        elif flat[i] == close_bracket:
            if depth == 0:
                close_pos = i
                break
            depth -= 1
    if close_pos == -1:
        return None

    if around:
        return Range(offset_to_position(open_pos, starts), offset_to_position(close_pos + 1, starts))
    return Range(offset_to_position(open_pos + 1, starts), offset_to_position(close_pos, starts))


# ============================================================================
# Paragraph text objects: ip, ap (linewise)
# ============================================================================


def _is_blank_line(text: str) -> bool:
    return first_non_blank(text) == len(text)


def _line_run(source: LineSource, line: int, blank: bool, step: int) -> int:
    """Last line reached walking from ``line`` while blankness equals ``blank``."""
    last = line
    i = line + step
    while 0 <= i < source.line_count() and _is_blank_line(source.line_at(i)) == blank:
        last = i
        i += step
    return last


def text_object_paragraph(source: LineSource, pos: Position, around: bool = False) -> Range:
    """Select the run of blank or non-blank lines under the cursor (ip/ap)."""
    line = max(0, min(pos.line, source.line_count() - 1))
    blank = _is_blank_line(source.line_at(line))
    top = _line_run(source, line, blank, -1)
    bottom = _line_run(source, line, blank, 1)
    if around:
        if bottom + 1 < source.line_count():
            bottom = _line_run(source, bottom + 1, not blank, 1)
        elif not blank and top > 0:
            top = _line_run(source, top - 1, True, -1)
    return Range(Position(top, 0), Position(bottom, 0), MotionType.LINEWISE)


# ============================================================================
# Sentence text objects: is, as
# ============================================================================


def text_object_sentence(source: LineSource, pos: Position, around: bool = False) -> Range | None:
    """Select the sentence under the cursor on its line (is/as)."""
    text, line, col = _normalize(source, pos)
    if not text or col >= len(text):
        return None
    if is_whitespace(text[col]):
        start, end = _run_bounds(text, col, is_whitespace)
        if around and end < len(text):
            end = sentence_end_after(text, end)
        return Range(Position(line, start), Position(line, end))

    start = first_non_blank(text)
    for candidate in sentence_starts(text):
        if candidate <= col:
            start = candidate
    end = sentence_end_after(text, start)
    if around:
        start, end = _swallow_blanks(text, start, end)
    return Range(Position(line, start), Position(line, end))


# ============================================================================
# Text object registry
# ============================================================================

# Map characters to (object_type, argument)
TEXT_OBJECT_CHARS: dict[str, tuple[str, str | None]] = {
    "w": ("word", None),
    "W": ("WORD", None),
    '"': ("quote", '"'),
    "'": ("quote", "'"),
    "`": ("quote", "`"),
    "(": ("bracket", "("),
    ")": ("bracket", "("),
    "b": ("bracket", "("),  # 'b' alias for ()
    "[": ("bracket", "["),
    "]": ("bracket", "["),
    "{": ("bracket", "{"),
    "}": ("bracket", "{"),
    "B": ("bracket", "{"),  # 'B' alias for {}
    "<": ("bracket", "<"),
    ">": ("bracket", "<"),
    "p": ("paragraph", None),
    "s": ("sentence", None),
}


def get_text_object(char: str, source: LineSource, pos: Position, around: bool) -> Range | None:
    """Get text object range by character."""
    if char not in TEXT_OBJECT_CHARS:
        return None

    obj_type, arg = TEXT_OBJECT_CHARS[char]

    if obj_type == "word":
        return text_object_word(source, pos, around)
    elif obj_type == "WORD":
        return text_object_WORD(source, pos, around)
    elif obj_type == "quote":
        return text_object_quote(source, pos, around, quote=arg or '"')
    elif obj_type == "bracket":
        return text_object_bracket(source, pos, around, bracket=arg or "(")
    elif obj_type == "paragraph":
        return text_object_paragraph(source, pos, around)
    elif obj_type == "sentence":
        return text_object_sentence(source, pos, around)

    return None
