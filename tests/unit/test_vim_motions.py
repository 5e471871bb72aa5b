"""Unit tests for vim motion engine."""

from __future__ import annotations

import pytest

from vimcore.editing.motions.basic import (
    motion_down,
    motion_left,
    motion_right,
    motion_up,
)
from vimcore.editing.motions.brackets import motion_matching_bracket
from vimcore.editing.motions.lines import (
    motion_current_line,
    motion_first_line,
    motion_first_non_blank,
    motion_goto_line,
    motion_jump,
    motion_last_line,
    motion_line_end,
    motion_line_start,
)
from vimcore.editing.motions.paragraphs import motion_paragraph_backward, motion_paragraph_forward
from vimcore.editing.motions.registry import CHAR_MOTIONS, MOTIONS
from vimcore.editing.motions.search import (
    char_motion_range,
    char_search_pos,
    motion_find_char,
    motion_find_char_back,
    motion_till_char,
    motion_till_char_back,
    reverse_direction,
)
from vimcore.editing.motions.sentences import motion_sentence_backward, motion_sentence_forward
from vimcore.editing.motions.words import (
    motion_change_WORD,
    motion_change_word,
    motion_WORD,
    motion_WORD_back,
    motion_WORD_end,
    motion_word,
    motion_word_back,
    motion_word_end,
    starts_on_blank,
    word_backward,
    word_forward,
)
from vimcore.editing.text_shape import char_class
from vimcore.editing.types import (
    LinesSnapshot,
    MotionType,
    Position,
    Range,
)


def src(text: str) -> LinesSnapshot:
    return LinesSnapshot.from_text(text)


class TestBasicMotions:
    """Tests for h, j, k, l motions."""

    def test_motion_left(self) -> None:
        result = motion_left(src("hello"), Position(0, 3))
        assert result.position == Position(0, 2)
        assert result.range == Range(Position(0, 2), Position(0, 3))

    def test_motion_left_at_start(self) -> None:
        result = motion_left(src("hello"), Position(0, 0))
        assert result.position == Position(0, 0)
        assert result.range is not None
        assert result.range.is_empty

    def test_motion_left_count(self) -> None:
        result = motion_left(src("hello"), Position(0, 4), 3)
        assert result.position == Position(0, 1)

    def test_motion_right(self) -> None:
        result = motion_right(src("hello"), Position(0, 2))
        assert result.position == Position(0, 3)
        assert result.range == Range(Position(0, 2), Position(0, 3))

    def test_motion_right_at_end(self) -> None:
        result = motion_right(src("hello"), Position(0, 5))
        assert result.position == Position(0, 5)

    def test_motion_down(self) -> None:
        result = motion_down(src("line1\nline2\nline3"), Position(0, 2))
        assert result is not None
        assert result.position == Position(1, 2)
        assert result.range is not None
        assert result.range.motion_type == MotionType.LINEWISE

    def test_motion_down_clamps_to_short_line(self) -> None:
        result = motion_down(src("long line\nab"), Position(0, 7))
        assert result is not None
        assert result.position == Position(1, 2)

    def test_motion_down_at_last_line(self) -> None:
        assert motion_down(src("line1\nline2"), Position(1, 0)) is None

    def test_motion_up(self) -> None:
        result = motion_up(src("line1\nline2\nline3"), Position(2, 2))
        assert result is not None
        assert result.position == Position(1, 2)
        assert result.range is not None
        assert result.range.motion_type == MotionType.LINEWISE

    def test_motion_up_count_stops_at_first_line(self) -> None:
        result = motion_up(src("a\nb\nc"), Position(2, 0), 10)
        assert result is not None
        assert result.position == Position(0, 0)

    def test_motion_up_at_first_line(self) -> None:
        assert motion_up(src("line1\nline2"), Position(0, 0)) is None


class TestWordMotions:
    """Tests for w, W, b, B, e, E motions."""

    def test_motion_word(self) -> None:
        result = motion_word(src("hello world"), Position(0, 0))
        assert result.position == Position(0, 6)

    def test_motion_word_on_punctuation(self) -> None:
        result = motion_word(src("foo.bar"), Position(0, 0))
        assert result.position == Position(0, 3)

    def test_motion_word_count(self) -> None:
        result = motion_word(src("one two three four"), Position(0, 0), 2)
        assert result.position == Position(0, 8)
        assert result.range == Range(Position(0, 0), Position(0, 8))

    def test_motion_word_stops_at_line_end(self) -> None:
        result = motion_word(src("last"), Position(0, 1))
        assert result.position == Position(0, 4)

    def test_motion_WORD(self) -> None:
        result = motion_WORD(src("foo.bar baz"), Position(0, 0))
        assert result.position == Position(0, 8)

    def test_motion_word_back(self) -> None:
        result = motion_word_back(src("hello world"), Position(0, 8))
        assert result.position == Position(0, 6)
        assert result.range == Range(Position(0, 6), Position(0, 8))

    def test_motion_word_back_at_start(self) -> None:
        result = motion_word_back(src("hello"), Position(0, 0))
        assert result.position == Position(0, 0)

    def test_motion_WORD_back(self) -> None:
        result = motion_WORD_back(src("foo.bar baz"), Position(0, 10))
        assert result.position == Position(0, 8)

    def test_motion_word_end(self) -> None:
        result = motion_word_end(src("hello world"), Position(0, 0))
        assert result.position == Position(0, 4)

    def test_motion_word_end_is_inclusive(self) -> None:
        result = motion_word_end(src("hello world"), Position(0, 0))
        assert result.range == Range(Position(0, 0), Position(0, 5))

    def test_motion_WORD_end(self) -> None:
        result = motion_WORD_end(src("foo.bar baz"), Position(0, 0))
        assert result.position == Position(0, 6)

    def test_starts_on_blank(self) -> None:
        source = src("a b")
        assert starts_on_blank(source, Position(0, 1))
        assert not starts_on_blank(source, Position(0, 0))
        assert starts_on_blank(src(""), Position(0, 0))

    def test_motion_change_word_stays_in_current_word(self) -> None:
        result = motion_change_word(src("foo bar"), Position(0, 2))
        assert result.range == Range(Position(0, 2), Position(0, 3))

    def test_motion_change_word_single_letter(self) -> None:
        result = motion_change_word(src("a b"), Position(0, 0))
        assert result.range == Range(Position(0, 0), Position(0, 1))

    def test_motion_change_word_count(self) -> None:
        result = motion_change_word(src("one two three"), Position(0, 0), 2)
        assert result.range == Range(Position(0, 0), Position(0, 7))

    def test_motion_change_word_punctuation_run(self) -> None:
        result = motion_change_word(src("foo..bar"), Position(0, 3))
        assert result.range == Range(Position(0, 3), Position(0, 5))

    def test_motion_change_WORD(self) -> None:
        result = motion_change_WORD(src("a.b c"), Position(0, 0))
        assert result.range == Range(Position(0, 0), Position(0, 3))


def word_starts(line: str) -> set[int]:
    return {
        i
        for i, ch in enumerate(line)
        if not ch.isspace() and (i == 0 or char_class(line[i - 1]) != char_class(ch))
    }


class TestWordRestart:
    """Alternating w and b from a word start only visits word starts."""

    @pytest.mark.parametrize(
        "line",
        [
            "foo bar baz",
            "foo.bar(baz)",
            "a  b_c , d",
            "x=1; y=2",
            "  indented words  ",
            "one",
        ],
    )
    def test_forward_then_backward(self, line: str) -> None:
        starts = word_starts(line)
        for start in sorted(starts):
            pos = start
            while pos < len(line):
                ahead = word_forward(line, pos)
                assert word_backward(line, ahead) == pos
                if ahead < len(line):
                    assert ahead in starts
                pos = ahead


class TestLineMotions:
    """Tests for 0, ^, $, G, gg motions."""

    def test_motion_line_start(self) -> None:
        result = motion_line_start(src("  hello"), Position(0, 5))
        assert result.position == Position(0, 0)
        assert result.range == Range(Position(0, 0), Position(0, 5))

    def test_motion_first_non_blank(self) -> None:
        result = motion_first_non_blank(src("   hello"), Position(0, 0))
        assert result.position == Position(0, 3)
        assert result.range == Range(Position(0, 0), Position(0, 3))

    def test_motion_first_non_blank_from_right(self) -> None:
        result = motion_first_non_blank(src("   hello"), Position(0, 6))
        assert result.range == Range(Position(0, 3), Position(0, 6))

    def test_motion_line_end(self) -> None:
        result = motion_line_end(src("hello"), Position(0, 0))
        assert result.position == Position(0, 5)
        assert result.range == Range(Position(0, 0), Position(0, 5))

    def test_motion_last_line(self) -> None:
        result = motion_last_line(src("line1\nline2\nline3"), Position(0, 0))
        assert result.position == Position(2, 0)
        assert result.range is not None
        assert result.range.motion_type == MotionType.LINEWISE

    def test_motion_last_line_with_count(self) -> None:
        result = motion_last_line(src("a\nb\nc"), Position(0, 0), 2)
        assert result.position == Position(1, 0)

    def test_motion_first_line(self) -> None:
        result = motion_first_line(src("a\nb\nc"), Position(2, 0))
        assert result.position == Position(0, 0)
        assert result.range == Range(Position(0, 0), Position(2, 0), MotionType.LINEWISE)

    def test_motion_goto_line_lands_on_first_non_blank(self) -> None:
        result = motion_goto_line(src("a\n   b"), Position(0, 0), 1)
        assert result.position == Position(1, 3)

    def test_motion_goto_line_clamps(self) -> None:
        result = motion_goto_line(src("a\nb"), Position(0, 0), 99)
        assert result.position.line == 1

    def test_motion_current_line_count(self) -> None:
        result = motion_current_line(src("a\nb\nc"), Position(0, 0), 5)
        assert result.range == Range(Position(0, 0), Position(2, 0), MotionType.LINEWISE)

    def test_motion_jump_is_ordered(self) -> None:
        result = motion_jump(src("abc\ndef"), Position(1, 2), Position(0, 1))
        assert result.position == Position(0, 1)
        assert result.range == Range(Position(0, 1), Position(1, 2))


class TestCharSearchMotions:
    """Tests for f, F, t, T motions."""

    def test_motion_find_char(self) -> None:
        result = motion_find_char(src("hello;world"), Position(0, 0), char=";")
        assert result is not None
        assert result.position == Position(0, 5)
        assert result.range == Range(Position(0, 0), Position(0, 6))

    def test_motion_find_char_count(self) -> None:
        result = motion_find_char(src("a,b,c,d"), Position(0, 0), 2, ",")
        assert result is not None
        assert result.position == Position(0, 3)

    def test_motion_find_char_not_found(self) -> None:
        assert motion_find_char(src("hello"), Position(0, 0), char="x") is None

    def test_motion_find_char_no_char(self) -> None:
        assert motion_find_char(src("hello"), Position(0, 0), char=None) is None

    def test_motion_find_char_back(self) -> None:
        result = motion_find_char_back(src("hello;world"), Position(0, 10), char=";")
        assert result is not None
        assert result.position == Position(0, 5)
        assert result.range == Range(Position(0, 5), Position(0, 11))

    def test_motion_till_char(self) -> None:
        result = motion_till_char(src("hello;world"), Position(0, 0), char=";")
        assert result is not None
        assert result.position == Position(0, 4)
        assert result.range == Range(Position(0, 0), Position(0, 5))

    def test_motion_till_char_back(self) -> None:
        result = motion_till_char_back(src("hello;world"), Position(0, 10), char=";")
        assert result is not None
        assert result.position == Position(0, 6)
        assert result.range == Range(Position(0, 6), Position(0, 10))

    def test_till_back_adjacent_has_no_range(self) -> None:
        result = motion_till_char_back(src("a;b"), Position(0, 2), char=";")
        assert result is not None
        assert result.position == Position(0, 2)
        assert result.range is None

    def test_char_search_pos_rejects_unknown_direction(self) -> None:
        with pytest.raises(ValueError):
            char_search_pos("x", "abc", 0, "b")

    def test_char_motion_range_empty(self) -> None:
        assert char_motion_range("T", 3, 3) is None

    def test_reverse_direction(self) -> None:
        assert reverse_direction("f") == "F"
        assert reverse_direction("T") == "t"


class TestBracketMatching:
    """Tests for % motion."""

    def test_motion_matching_bracket_forward(self) -> None:
        result = motion_matching_bracket(src("(hello)"), Position(0, 0))
        assert result is not None
        assert result.position == Position(0, 6)
        assert result.range == Range(Position(0, 0), Position(0, 7))

    def test_motion_matching_bracket_backward(self) -> None:
        result = motion_matching_bracket(src("(hello)"), Position(0, 6))
        assert result is not None
        assert result.position == Position(0, 0)
        assert result.range == Range(Position(0, 0), Position(0, 7))

    def test_motion_matching_bracket_nested(self) -> None:
        result = motion_matching_bracket(src("((inner))"), Position(0, 0))
        assert result is not None
        assert result.position == Position(0, 8)

    def test_motion_matching_bracket_curly(self) -> None:
        result = motion_matching_bracket(src("{foo}"), Position(0, 0))
        assert result is not None
        assert result.position == Position(0, 4)

    def test_motion_matching_bracket_square(self) -> None:
        result = motion_matching_bracket(src("[foo]"), Position(0, 0))
        assert result is not None
        assert result.position == Position(0, 4)

    def test_motion_matching_bracket_multiline(self) -> None:
        result = motion_matching_bracket(src("(\n  inner\n)"), Position(0, 0))
        assert result is not None
        assert result.position == Position(2, 0)

    def test_motion_matching_bracket_scans_right(self) -> None:
        result = motion_matching_bracket(src("x (a)"), Position(0, 0))
        assert result is not None
        assert result.position == Position(0, 4)

    def test_motion_matching_bracket_none(self) -> None:
        assert motion_matching_bracket(src("plain"), Position(0, 0)) is None

    def test_motion_matching_bracket_unbalanced(self) -> None:
        assert motion_matching_bracket(src("(open"), Position(0, 0)) is None


class TestParagraphMotions:
    """Tests for { and } motions."""

    SOURCE = "a\nb\n\nc\n\nd"

    def test_paragraph_forward(self) -> None:
        result = motion_paragraph_forward(src(self.SOURCE), Position(0, 0))
        assert result.position == Position(2, 0)
        assert result.range == Range(Position(0, 0), Position(2, 0))

    def test_paragraph_forward_count(self) -> None:
        result = motion_paragraph_forward(src(self.SOURCE), Position(0, 0), 2)
        assert result.position == Position(4, 0)

    def test_paragraph_forward_to_buffer_end(self) -> None:
        result = motion_paragraph_forward(src(self.SOURCE), Position(4, 0))
        assert result.position == Position(5, 0)
        assert result.range == Range(Position(4, 0), Position(5, 1))

    def test_paragraph_backward(self) -> None:
        result = motion_paragraph_backward(src(self.SOURCE), Position(5, 0))
        assert result.position == Position(4, 0)

    def test_paragraph_backward_to_buffer_start(self) -> None:
        result = motion_paragraph_backward(src(self.SOURCE), Position(1, 0))
        assert result.position == Position(0, 0)


class TestSentenceMotions:
    """Tests for ( and ) motions."""

    TEXT = "Hello world. This is it. Done"

    def test_sentence_forward(self) -> None:
        result = motion_sentence_forward(src(self.TEXT), Position(0, 0))
        assert result.position == Position(0, 13)

    def test_sentence_forward_at_last_sentence(self) -> None:
        result = motion_sentence_forward(src(self.TEXT), Position(0, 25))
        assert result.position == Position(0, len(self.TEXT))

    def test_sentence_forward_crosses_lines(self) -> None:
        result = motion_sentence_forward(src("One.\n  Two."), Position(0, 0))
        assert result.position == Position(1, 2)

    def test_sentence_backward(self) -> None:
        result = motion_sentence_backward(src(self.TEXT), Position(0, 20))
        assert result.position == Position(0, 13)

    def test_sentence_backward_count(self) -> None:
        result = motion_sentence_backward(src(self.TEXT), Position(0, 20), 2)
        assert result.position == Position(0, 0)


class TestMotionRegistry:
    """Tests for the motion registry."""

    def test_all_motions_registered(self) -> None:
        for key in ["h", "j", "k", "l", "w", "W", "b", "B", "e", "E", "0", "^", "$", "G", "gg", "%", "{", "}", "(", ")"]:
            assert key in MOTIONS

    def test_char_motions(self) -> None:
        assert CHAR_MOTIONS == {"f", "F", "t", "T"}
