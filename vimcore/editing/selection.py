"""Visual selection normalization."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .types import LineSource, MotionType, Position, Range


@dataclass(frozen=True)
class VisualSelection:
    """Anchor and moving cursor of a visual selection.

    Stored unordered: the cursor may cross the anchor at any time.
    """

    anchor: Position
    cursor: Position
    kind: MotionType = MotionType.CHARWISE

    @property
    def linewise(self) -> bool:
        return self.kind == MotionType.LINEWISE

    def moved_to(self, cursor: Position) -> VisualSelection:
        return replace(self, cursor=cursor)

    def swapped(self) -> VisualSelection:
        return replace(self, anchor=self.cursor, cursor=self.anchor)

    @property
    def top_line(self) -> int:
        return min(self.anchor.line, self.cursor.line)

    @property
    def bottom_line(self) -> int:
        return max(self.anchor.line, self.cursor.line)


def normalize_selection(selection: VisualSelection, source: LineSource) -> tuple[Position, Position]:
    """Ordered [start, end) span the host should highlight.

    Line selections run from column 0 of the top line to column 0 of the
    line after the bottom line, or to the end of the buffer.
    """
    if selection.linewise:
        top = selection.top_line
        bottom = selection.bottom_line
        start = Position(top, 0)
        if bottom + 1 < source.line_count():
            end = Position(bottom + 1, 0)
        else:
            end = Position(bottom, len(source.line_at(bottom)))
        return start, end
    if selection.anchor <= selection.cursor:
        return selection.anchor, selection.cursor
    return selection.cursor, selection.anchor


def selection_range(selection: VisualSelection, source: LineSource) -> Range:
    """Operator range for a selection (linewise over whole lines, else charwise)."""
    if selection.linewise:
        return Range(
            Position(selection.top_line, 0),
            Position(selection.bottom_line, 0),
            MotionType.LINEWISE,
        )
    start, end = normalize_selection(selection, source)
    return Range(start, end)
