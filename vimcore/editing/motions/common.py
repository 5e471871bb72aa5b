"""Shared helpers for motion calculations."""

from __future__ import annotations

from ..types import LineSource, Position


def _normalize(source: LineSource, pos: Position) -> tuple[str, int, int]:
    """Clamp a position into the buffer and return (line_text, line, col)."""
    line = max(0, min(pos.line, source.line_count() - 1))
    text = source.line_at(line)
    col = max(0, min(pos.col, len(text)))
    return text, line, col


def _times(count: int | None) -> int:
    """Number of times a repeatable motion runs."""
    return count if count and count > 0 else 1
