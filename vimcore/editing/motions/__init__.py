"""Pure motion functions for vim-style navigation."""

from .registry import CHAR_MOTIONS, MOTIONS, VERTICAL_MOTIONS

__all__ = ["CHAR_MOTIONS", "MOTIONS", "VERTICAL_MOTIONS"]
