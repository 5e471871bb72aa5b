"""Data persistence stores for vimcore.

- SettingsStore: manages editor settings
"""

from .base import CONFIG_DIR, JSONFileStore
from .settings import EditorSettings, SettingsStore

__all__ = [
    "CONFIG_DIR",
    "EditorSettings",
    "JSONFileStore",
    "SettingsStore",
]
