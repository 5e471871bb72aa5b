"""Configuration management for vimcore.

Re-exports the config paths and wraps the settings store so callers do not
import store modules directly.
"""

from __future__ import annotations

from .stores.base import CONFIG_DIR
from .stores.settings import EditorSettings


def load_settings() -> EditorSettings:
    """Load editor settings from config file."""
    from .stores.settings import load_settings as _load_settings

    return _load_settings()


def save_settings(settings: EditorSettings) -> None:
    """Save editor settings to config file."""
    from .stores.settings import save_settings as _save_settings

    _save_settings(settings)


__all__ = ["CONFIG_DIR", "EditorSettings", "load_settings", "save_settings"]
