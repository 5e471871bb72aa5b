"""Pure editing engine: motions, text objects, selections and operators."""

from .commands import (
    join_lines,
    open_line_above,
    open_line_below,
    put_after,
    put_before,
    replace_chars,
    toggle_case,
)
from .motions.registry import CHAR_MOTIONS, MOTIONS, VERTICAL_MOTIONS
from .operators import OPERATORS, apply_operator, operator_change, operator_delete, operator_yank
from .selection import VisualSelection, normalize_selection, selection_range
from .text_objects import TEXT_OBJECT_CHARS, get_text_object

# Vim motion engine
from .types import (
    Edit,
    LineSource,
    LinesSnapshot,
    MotionResult,
    MotionType,
    OperatorResult,
    Position,
    Range,
    Register,
)

__all__ = [
    # Types
    "Edit",
    "LineSource",
    "LinesSnapshot",
    "MotionResult",
    "MotionType",
    "OperatorResult",
    "Position",
    "Range",
    "Register",
    # Motions
    "CHAR_MOTIONS",
    "MOTIONS",
    "VERTICAL_MOTIONS",
    # Operators
    "OPERATORS",
    "apply_operator",
    "operator_change",
    "operator_delete",
    "operator_yank",
    # Commands
    "join_lines",
    "open_line_above",
    "open_line_below",
    "put_after",
    "put_before",
    "replace_chars",
    "toggle_case",
    # Selection
    "VisualSelection",
    "normalize_selection",
    "selection_range",
    # Text objects
    "TEXT_OBJECT_CHARS",
    "get_text_object",
]
