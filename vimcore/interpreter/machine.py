"""Key-sequence state machine.

Each key runs through a fixed priority order, first match wins:

1. count digits, unless a single-key prefix is pending
2. a pending single-key prefix (f/F/t/T, '/`, g, r, m, and i/a in visual mode),
   which takes any key, digits included, as its argument
3. a pending operator's motion or text object
4. bare motions (normal and visual mode share the resolver)
5. operator keys (pending in normal mode, immediate in visual mode)
6. mode changes and the remaining editing commands

Anything else drops the pending input and is otherwise ignored.
"""

from __future__ import annotations

import logging

from ..editing import commands
from ..editing.motions.lines import (
    motion_current_line,
    motion_first_line,
    motion_goto_line,
    motion_jump,
    motion_line_end,
)
from ..editing.motions.registry import CHAR_MOTIONS, MOTIONS, VERTICAL_MOTIONS
from ..editing.motions.search import reverse_direction
from ..editing.motions.words import motion_change_WORD, motion_change_word, starts_on_blank
from ..editing.operators import apply_operator, operator_change, operator_delete
from ..editing.selection import VisualSelection, normalize_selection, selection_range
from ..editing.text_objects import get_text_object
from ..editing.text_shape import clamp_line, clamp_position, first_non_blank
from ..editing.types import MotionResult, MotionType, OperatorResult, Position, Range
from .host import EditorHost, KeyResult
from .state import (
    FIND_PREFIXES,
    GO_PREFIX,
    MARK_JUMP_PREFIXES,
    MARK_SET_PREFIX,
    REPLACE_PREFIX,
    TEXT_OBJECT_PREFIXES,
    AwaitingOperatorPrefix,
    AwaitingOperatorTarget,
    AwaitingPrefix,
    CharSearch,
    Mode,
    Operator,
    SessionState,
)

log = logging.getLogger(__name__)

ESCAPE = "escape"

OPERATOR_KEYS = {op.value: op for op in Operator}

SCREEN_MOTIONS = frozenset("HML")
REPEAT_SEARCH_KEYS = frozenset(";,")

# Keys that resolve to a motion without another key
BARE_MOTION_KEYS = (
    frozenset(MOTIONS) - CHAR_MOTIONS - {"_", "gg"}
) | SCREEN_MOTIONS | REPEAT_SEARCH_KEYS

NORMAL_PREFIXES = FIND_PREFIXES | MARK_JUMP_PREFIXES | {GO_PREFIX, REPLACE_PREFIX, MARK_SET_PREFIX}
VISUAL_PREFIXES = FIND_PREFIXES | MARK_JUMP_PREFIXES | TEXT_OBJECT_PREFIXES | {GO_PREFIX, MARK_SET_PREFIX}
OPERATOR_PREFIXES = FIND_PREFIXES | MARK_JUMP_PREFIXES | TEXT_OBJECT_PREFIXES | {GO_PREFIX}

DIGITS = frozenset("0123456789")


class KeyInterpreter:
    """Turns key events into motions and edits on an EditorHost."""

    def __init__(self, state: SessionState | None = None) -> None:
        self.state = state or SessionState()
        self._clipboard: str | None = None

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def reset(self) -> None:
        """Return to normal mode, dropping pending input and any selection."""
        self.state.mode = Mode.NORMAL
        self.state.visual = None
        self.state.desired_column = None
        self.state.clear_pending()

    def handle_key(self, key: str, host: EditorHost) -> KeyResult:
        """Process one key to completion."""
        self._clipboard = None
        consumed = self._dispatch(key, host)
        return KeyResult(consumed=consumed, mode=self.state.mode, clipboard=self._clipboard)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, key: str, host: EditorHost) -> bool:
        state = self.state
        if key == ESCAPE:
            self._escape(host)
            return True
        if state.mode == Mode.INSERT:
            return False

        if self._accumulate_digit(key):
            return True

        pending = state.pending
        if isinstance(pending, AwaitingPrefix):
            self._resolve_prefix(pending.prefix, key, host)
            return True
        if isinstance(pending, (AwaitingOperatorTarget, AwaitingOperatorPrefix)):
            self._resolve_operator(pending, key, host)
            return True

        prefixes = VISUAL_PREFIXES if state.mode.is_visual else NORMAL_PREFIXES
        if key in prefixes:
            state.pending = AwaitingPrefix(key)
            return True

        if key in BARE_MOTION_KEYS:
            count = state.take_count()
            self._move(host, self._motion(key, None, host, self._cursor(host), count))
            return True

        if key in OPERATOR_KEYS or (key == "x" and state.mode.is_visual):
            op = OPERATOR_KEYS.get(key, Operator.DELETE)
            if state.mode.is_visual:
                self._operate_on_selection(op, host)
            else:
                state.operator_count = state.take_count()
                state.pending = AwaitingOperatorTarget(op)
            return True

        handler = self._visual_command if state.mode.is_visual else self._normal_command
        if not handler(key, host):
            log.debug("Ignoring key %r in %s mode", key, state.mode.value)
            state.clear_pending()
        return True

    def _accumulate_digit(self, key: str) -> bool:
        if key not in DIGITS:
            return False
        if isinstance(self.state.pending, (AwaitingPrefix, AwaitingOperatorPrefix)):
            return False
        if key == "0" and not self.state.count_buffer:
            return False
        self.state.count_buffer += key
        return True

    def _cursor(self, host: EditorHost) -> Position:
        if self.state.visual is not None:
            return self.state.visual.cursor
        return clamp_position(host.cursor(), host)

    # ------------------------------------------------------------------
    # Motions
    # ------------------------------------------------------------------

    def _motion(
        self, key: str, arg: str | None, host: EditorHost, pos: Position, count: int | None
    ) -> MotionResult | None:
        """Resolve a motion key (with its argument, if any) from ``pos``."""
        state = self.state
        if key in VERTICAL_MOTIONS:
            col = state.desired_column if state.desired_column is not None else pos.col
            state.desired_column = col
            return MOTIONS[key](host, Position(pos.line, col), count, None)
        state.desired_column = None

        if key in REPEAT_SEARCH_KEYS:
            search = state.last_search
            if search is None:
                return None
            direction = search.direction if key == ";" else reverse_direction(search.direction)
            return MOTIONS[direction](host, pos, count, search.char)
        if key in CHAR_MOTIONS:
            if arg is None:
                return None
            state.last_search = CharSearch(key, arg)
            return MOTIONS[key](host, pos, count, arg)
        if key in SCREEN_MOTIONS:
            return self._screen_motion(key, host, pos, count)
        if key in MARK_JUMP_PREFIXES:
            mark = state.marks.get(arg or "")
            if mark is None:
                return None
            if key == "'":
                return motion_goto_line(host, pos, mark.line)
            return motion_jump(host, pos, mark)
        if key == "gg":
            return motion_first_line(host, pos, count, None)
        func = MOTIONS.get(key)
        if func is None:
            return None
        return func(host, pos, count, arg)

    def _screen_motion(self, key: str, host: EditorHost, pos: Position, count: int | None) -> MotionResult:
        view = host.visible_line_range()
        offset = (count or 1) - 1
        if key == "H":
            target = min(view.top + offset, view.bottom)
        elif key == "L":
            target = max(view.bottom - offset, view.top)
        else:
            target = view.middle
        return motion_goto_line(host, pos, target)

    def _move(self, host: EditorHost, result: MotionResult | None) -> None:
        """Place the cursor (normal) or the visual cursor (visual) at a motion's target."""
        state = self.state
        state.clear_pending()
        if result is None:
            return
        if state.visual is not None:
            # The visual cursor may sit past the last character (exclusive end)
            line = clamp_line(result.position.line, host)
            target = Position(line, max(0, min(result.position.col, len(host.line_at(line)))))
            state.visual = state.visual.moved_to(target)
            self._show_selection(host)
        else:
            host.move_cursor(clamp_position(result.position, host))

    def _show_selection(self, host: EditorHost) -> None:
        if self.state.visual is None:
            return
        start, end = normalize_selection(self.state.visual, host)
        host.set_selection(start, end)

    # ------------------------------------------------------------------
    # Prefixes
    # ------------------------------------------------------------------

    def _resolve_prefix(self, prefix: str, key: str, host: EditorHost) -> None:
        state = self.state
        pos = self._cursor(host)
        count = state.take_count()

        if prefix in FIND_PREFIXES or prefix in MARK_JUMP_PREFIXES:
            self._move(host, self._motion(prefix, key, host, pos, count))
        elif prefix == GO_PREFIX:
            self._move(host, self._motion("gg", None, host, pos, count) if key == "g" else None)
        elif prefix == REPLACE_PREFIX:
            state.clear_pending()
            self._apply(host, commands.replace_chars(host, pos, key, count or 1))
        elif prefix == MARK_SET_PREFIX:
            state.clear_pending()
            if len(key) == 1 and "a" <= key <= "z":
                state.marks[key] = pos
        elif prefix in TEXT_OBJECT_PREFIXES:
            state.clear_pending()
            self._select_text_object(host, get_text_object(key, host, pos, around=prefix == "a"))
        else:
            state.clear_pending()

    def _select_text_object(self, host: EditorHost, range_obj: Range | None) -> None:
        """Replace the visual selection with a text object's range."""
        state = self.state
        if range_obj is None or state.visual is None:
            return
        if range_obj.linewise:
            state.mode = Mode.VISUAL_LINE
            state.visual = VisualSelection(range_obj.start, range_obj.end, MotionType.LINEWISE)
        else:
            state.visual = VisualSelection(range_obj.start, range_obj.end, state.visual.kind)
        self._show_selection(host)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def _resolve_operator(
        self, pending: AwaitingOperatorTarget | AwaitingOperatorPrefix, key: str, host: EditorHost
    ) -> None:
        state = self.state
        op = pending.operator
        pos = self._cursor(host)
        range_obj: Range | None = None

        if isinstance(pending, AwaitingOperatorPrefix):
            prefix = pending.prefix
            count = state.take_count()
            if prefix in TEXT_OBJECT_PREFIXES:
                range_obj = get_text_object(key, host, pos, around=prefix == "a")
            else:
                motion_key = prefix
                if prefix == GO_PREFIX:
                    motion_key = "gg" if key == "g" else ""
                result = self._motion(motion_key, key, host, pos, count) if motion_key else None
                range_obj = result.range if result else None
        elif key == op.value:
            count = state.take_count()
            range_obj = motion_current_line(host, pos, count, None).range
        elif key in OPERATOR_PREFIXES:
            state.pending = AwaitingOperatorPrefix(op, key)
            return
        elif key in BARE_MOTION_KEYS:
            count = state.take_count()
            if op == Operator.CHANGE and key in ("w", "W") and not starts_on_blank(host, pos):
                # cw stops at the end of the word under the cursor
                change = motion_change_word if key == "w" else motion_change_WORD
                result = change(host, pos, count, None)
            else:
                result = self._motion(key, None, host, pos, count)
            range_obj = result.range if result else None
        else:
            log.debug("Operator %s cancelled by %r", op.value, key)

        state.clear_pending()
        if range_obj is None:
            return
        state.desired_column = None
        self._apply(host, apply_operator(op.value, host, range_obj))

    def _operate_on_selection(self, op: Operator, host: EditorHost) -> None:
        state = self.state
        selection = state.visual
        if selection is None:
            return
        range_obj = selection_range(selection, host)
        state.visual = None
        state.mode = Mode.NORMAL
        state.clear_pending()
        result = apply_operator(op.value, host, range_obj)
        if result is None:
            host.move_cursor(clamp_position(range_obj.start, host))
            return
        self._apply(host, result)

    def _apply(self, host: EditorHost, result: OperatorResult | None) -> None:
        """Send an edit result to the host and update mode and register."""
        if result is None:
            return
        state = self.state
        for edit in result.edits:
            host.replace_range(edit.start, edit.end, edit.text)
        if result.register is not None:
            state.register = result.register
            self._clipboard = result.register.text
        state.desired_column = None
        if result.enter_insert:
            self._enter_insert(host, result.cursor)
        else:
            host.move_cursor(result.cursor)

    # ------------------------------------------------------------------
    # Mode changes and commands
    # ------------------------------------------------------------------

    def _enter_insert(self, host: EditorHost, pos: Position) -> None:
        state = self.state
        state.mode = Mode.INSERT
        state.visual = None
        state.clear_pending()
        host.move_cursor(pos)

    def _enter_visual(self, host: EditorHost, kind: MotionType) -> None:
        state = self.state
        pos = clamp_position(host.cursor(), host)
        state.visual = VisualSelection(pos, pos, kind)
        state.mode = Mode.VISUAL_LINE if kind == MotionType.LINEWISE else Mode.VISUAL_CHAR
        state.clear_pending()
        self._show_selection(host)

    def _escape(self, host: EditorHost) -> None:
        state = self.state
        if state.mode == Mode.INSERT:
            pos = host.cursor()
            host.move_cursor(Position(pos.line, max(0, pos.col - 1)))
        elif state.visual is not None:
            host.move_cursor(clamp_position(state.visual.cursor, host))
        self.reset()

    def _normal_command(self, key: str, host: EditorHost) -> bool:
        state = self.state
        pos = clamp_position(host.cursor(), host)
        text = host.line_at(pos.line)

        if key == "i":
            self._enter_insert(host, pos)
        elif key == "a":
            self._enter_insert(host, Position(pos.line, min(pos.col + 1, len(text))))
        elif key == "A":
            self._enter_insert(host, Position(pos.line, len(text)))
        elif key == "I":
            self._enter_insert(host, Position(pos.line, first_non_blank(text)))
        elif key == "o":
            state.clear_pending()
            self._apply(host, commands.open_line_below(host, pos.line))
        elif key == "O":
            state.clear_pending()
            self._apply(host, commands.open_line_above(host, pos.line))
        elif key in ("x", "s"):
            count = state.take_count() or 1
            span = Range(pos, Position(pos.line, min(pos.col + count, len(text))))
            if key == "x":
                self._apply(host, operator_delete(host, span))
            else:
                self._change_or_insert(host, span, pos)
        elif key == "S":
            count = state.take_count()
            self._apply(host, operator_change(host, motion_current_line(host, pos, count, None).range))
        elif key in ("C", "D"):
            state.clear_pending()
            span = motion_line_end(host, pos).range
            if key == "D":
                self._apply(host, operator_delete(host, span))
            else:
                self._change_or_insert(host, span, pos)
        elif key == "J":
            self._apply(host, commands.join_lines(host, pos.line, state.take_count() or 1))
        elif key == "~":
            self._apply(host, commands.toggle_case(host, pos, state.take_count() or 1))
        elif key == "u":
            for _ in range(state.take_count() or 1):
                host.undo()
        elif key in ("p", "P"):
            count = state.take_count() or 1
            if state.register is not None:
                put = commands.put_after if key == "p" else commands.put_before
                self._apply(host, put(host, pos, state.register, count))
        elif key == "Y":
            count = state.take_count()
            self._apply(host, apply_operator("y", host, motion_current_line(host, pos, count, None).range))
        elif key == "v":
            self._enter_visual(host, MotionType.CHARWISE)
        elif key == "V":
            self._enter_visual(host, MotionType.LINEWISE)
        else:
            return False
        state.clear_pending()
        return True

    def _change_or_insert(self, host: EditorHost, span: Range | None, pos: Position) -> None:
        result = operator_change(host, span) if span is not None else None
        if result is None:
            self._enter_insert(host, pos)
        else:
            self._apply(host, result)

    def _visual_command(self, key: str, host: EditorHost) -> bool:
        state = self.state
        if state.visual is None:
            return False
        kind = MotionType.LINEWISE if key == "V" else MotionType.CHARWISE
        if key in ("v", "V"):
            if state.visual.kind == kind:
                self._escape(host)
                return True
            state.visual = VisualSelection(state.visual.anchor, state.visual.cursor, kind)
            state.mode = Mode.VISUAL_LINE if kind == MotionType.LINEWISE else Mode.VISUAL_CHAR
        elif key == "o":
            state.visual = state.visual.swapped()
        else:
            return False
        state.clear_pending()
        self._show_selection(host)
        return True


__all__ = ["ESCAPE", "KeyInterpreter"]
