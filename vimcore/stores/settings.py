"""Settings store for editor preferences."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from .base import CONFIG_DIR, JSONFileStore


def _resolve_settings_path() -> Path:
    override = os.environ.get("VIMCORE_SETTINGS_PATH", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "settings.json"


@dataclass
class EditorSettings:
    """Persisted editor preferences."""

    vim_enabled: bool = True
    system_clipboard: bool = True
    show_mode: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EditorSettings:
        """Build settings from stored JSON, ignoring unknown or mistyped keys."""
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            if isinstance(value, bool):
                values[f.name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class SettingsStore(JSONFileStore):
    """Store for editor settings, kept as a JSON object in ~/.vimcore/settings.json."""

    def __init__(self, file_path: Path | None = None) -> None:
        super().__init__(file_path or _resolve_settings_path())

    @classmethod
    def get_instance(cls) -> SettingsStore:
        """Get the singleton instance."""
        return _get_store()

    def load_all(self) -> dict[str, Any]:
        """Load all settings.

        Returns:
            Dictionary of settings, or empty dict if none exist.
        """
        data = self._read_json()
        return data if isinstance(data, dict) else {}

    def save_all(self, settings: dict[str, Any]) -> None:
        self._write_json(settings)

    def load_editor_settings(self) -> EditorSettings:
        return EditorSettings.from_dict(self.load_all())

    def save_editor_settings(self, settings: EditorSettings) -> None:
        """Merge editor settings into the file, keeping unrelated keys."""
        data = self.load_all()
        data.update(settings.to_dict())
        self.save_all(data)


_store: SettingsStore | None = None
_store_path: Path | None = None


def _get_store() -> SettingsStore:
    global _store, _store_path
    path = _resolve_settings_path()
    if _store is None or _store_path != path:
        _store = SettingsStore(file_path=path)
        _store_path = path
    return _store


def load_settings() -> EditorSettings:
    """Load editor settings from the settings file."""
    return _get_store().load_editor_settings()


def save_settings(settings: EditorSettings) -> None:
    """Save editor settings to the settings file."""
    _get_store().save_editor_settings(settings)
