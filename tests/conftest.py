"""Pytest configuration for vimcore tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="vimcore-test-config-"))
os.environ.setdefault("VIMCORE_CONFIG_DIR", str(_TEST_CONFIG_DIR))


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    """Point the settings store at a fresh file."""
    path = tmp_path / "settings.json"
    monkeypatch.setenv("VIMCORE_SETTINGS_PATH", str(path))
    return path
