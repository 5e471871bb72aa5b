"""Textual integration for the modal interpreter."""

from .app import ModalEditorApp
from .widgets import ModeIndicator, TextAreaHost, VimTextArea

__all__ = [
    "ModalEditorApp",
    "ModeIndicator",
    "TextAreaHost",
    "VimTextArea",
]
