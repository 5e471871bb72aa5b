"""Unit tests for vim text objects."""

from __future__ import annotations

from vimcore.editing.text_objects import (
    TEXT_OBJECT_CHARS,
    get_text_object,
    text_object_bracket,
    text_object_paragraph,
    text_object_quote,
    text_object_sentence,
    text_object_word,
    text_object_WORD,
)
from vimcore.editing.types import LinesSnapshot, MotionType, Position, Range


def src(text: str) -> LinesSnapshot:
    return LinesSnapshot.from_text(text)


def span(line: int, start: int, end: int) -> Range:
    return Range(Position(line, start), Position(line, end))


class TestWordObjects:
    """Tests for iw, aw, iW, aW."""

    def test_inner_word(self) -> None:
        assert text_object_word(src("hello world"), Position(0, 1)) == span(0, 0, 5)

    def test_around_word_takes_trailing_blanks(self) -> None:
        assert text_object_word(src("hello world"), Position(0, 1), around=True) == span(0, 0, 6)

    def test_around_last_word_takes_leading_blanks(self) -> None:
        assert text_object_word(src("hello world"), Position(0, 7), around=True) == span(0, 5, 11)

    def test_inner_word_on_blank_selects_blank_run(self) -> None:
        assert text_object_word(src("a   b"), Position(0, 2)) == span(0, 1, 4)

    def test_around_word_on_blank_takes_next_word(self) -> None:
        assert text_object_word(src("a   b"), Position(0, 2), around=True) == span(0, 1, 5)

    def test_inner_word_punctuation_run(self) -> None:
        assert text_object_word(src("foo..bar"), Position(0, 3)) == span(0, 3, 5)

    def test_inner_WORD(self) -> None:
        assert text_object_WORD(src("foo.bar baz"), Position(0, 2)) == span(0, 0, 7)

    def test_word_on_empty_line(self) -> None:
        assert text_object_word(src(""), Position(0, 0)) is None


class TestQuoteObjects:
    """Tests for i", a", i', a'."""

    TEXT = 'say "hello" ok'

    def test_inner_quote(self) -> None:
        assert text_object_quote(src(self.TEXT), Position(0, 6)) == span(0, 5, 10)

    def test_around_quote(self) -> None:
        assert text_object_quote(src(self.TEXT), Position(0, 6), around=True) == span(0, 4, 11)

    def test_cursor_on_quote(self) -> None:
        assert text_object_quote(src(self.TEXT), Position(0, 4)) == span(0, 5, 10)

    def test_cursor_after_quotes(self) -> None:
        assert text_object_quote(src(self.TEXT), Position(0, 12)) is None

    def test_single_quote_char(self) -> None:
        assert text_object_quote(src("x 'ab' y"), Position(0, 3), quote="'") == span(0, 3, 5)

    def test_unpaired_quote(self) -> None:
        assert text_object_quote(src('a "b'), Position(0, 3)) is None


class TestBracketObjects:
    """Tests for i(, a(, i{, ib, iB and friends."""

    def test_inner_parens(self) -> None:
        assert text_object_bracket(src("f(a, b)"), Position(0, 3)) == span(0, 2, 6)

    def test_around_parens(self) -> None:
        assert text_object_bracket(src("f(a, b)"), Position(0, 3), around=True) == span(0, 1, 7)

    def test_nested_picks_innermost(self) -> None:
        assert text_object_bracket(src("((x))"), Position(0, 2)) == span(0, 2, 3)
        assert text_object_bracket(src("((x))"), Position(0, 2), around=True) == span(0, 1, 4)

    def test_cursor_on_closing_bracket(self) -> None:
        assert text_object_bracket(src("(ab)"), Position(0, 3)) == span(0, 1, 3)

    def test_multiline(self) -> None:
        result = text_object_bracket(src("(\n  x\n)"), Position(1, 2))
        assert result == Range(Position(0, 1), Position(2, 0))

    def test_closing_char_selects_pair(self) -> None:
        assert text_object_bracket(src("[a]"), Position(0, 1), bracket="]") == span(0, 1, 2)

    def test_angle_brackets(self) -> None:
        assert text_object_bracket(src("a<b>c"), Position(0, 2), bracket="<") == span(0, 2, 3)

    def test_not_inside(self) -> None:
        assert text_object_bracket(src("abc"), Position(0, 1)) is None


class TestParagraphObjects:
    """Tests for ip and ap."""

    TEXT = "a\nb\n\nc"

    def test_inner_paragraph(self) -> None:
        result = text_object_paragraph(src(self.TEXT), Position(0, 0))
        assert result == Range(Position(0, 0), Position(1, 0), MotionType.LINEWISE)

    def test_around_paragraph_takes_following_blanks(self) -> None:
        result = text_object_paragraph(src(self.TEXT), Position(0, 0), around=True)
        assert result == Range(Position(0, 0), Position(2, 0), MotionType.LINEWISE)

    def test_around_last_paragraph_takes_preceding_blanks(self) -> None:
        result = text_object_paragraph(src(self.TEXT), Position(3, 0), around=True)
        assert result == Range(Position(2, 0), Position(3, 0), MotionType.LINEWISE)

    def test_whitespace_lines_count_as_blank(self) -> None:
        result = text_object_paragraph(src("a\n  \n\nb"), Position(1, 0))
        assert result == Range(Position(1, 0), Position(2, 0), MotionType.LINEWISE)


class TestSentenceObjects:
    """Tests for is and as."""

    def test_inner_sentence(self) -> None:
        assert text_object_sentence(src("One. Two."), Position(0, 6)) == span(0, 5, 9)

    def test_around_sentence(self) -> None:
        assert text_object_sentence(src("One. Two."), Position(0, 6), around=True) == span(0, 4, 9)

    def test_around_first_sentence_takes_trailing_blank(self) -> None:
        assert text_object_sentence(src("One. Two."), Position(0, 1), around=True) == span(0, 0, 5)

    def test_empty_line(self) -> None:
        assert text_object_sentence(src(""), Position(0, 0)) is None


class TestTextObjectRegistry:
    """Tests for get_text_object dispatch."""

    def test_known_chars(self) -> None:
        for char in ["w", "W", '"', "'", "`", "(", ")", "b", "[", "]", "{", "}", "B", "<", ">", "p", "s"]:
            assert char in TEXT_OBJECT_CHARS

    def test_dispatch_alias(self) -> None:
        assert get_text_object("b", src("f(a)"), Position(0, 2), around=False) == span(0, 2, 3)

    def test_unknown_char(self) -> None:
        assert get_text_object("z", src("abc"), Position(0, 0), around=False) is None
