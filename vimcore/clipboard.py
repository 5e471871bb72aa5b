"""System clipboard access."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)


def copy_to_system_clipboard(text: str) -> bool:
    """Copy text with pyperclip. Returns False when the platform has no clipboard."""
    try:
        import pyperclip  # pyright: ignore[reportMissingModuleSource]

        pyperclip.copy(text)
        return True
    except Exception:
        log.debug("pyperclip copy failed", exc_info=True)
        return False
