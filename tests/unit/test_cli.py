"""Unit tests for CLI argument handling."""

from __future__ import annotations

import os
from unittest.mock import patch

from vimcore.cli import build_parser, main


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.file is None
        assert not args.no_vim
        assert not args.no_clipboard
        assert not args.debug
        assert args.settings is None

    def test_flags(self) -> None:
        args = build_parser().parse_args(["--no-vim", "--no-clipboard", "notes.txt"])
        assert args.no_vim
        assert args.no_clipboard
        assert str(args.file) == "notes.txt"


class TestMain:
    def test_flags_override_settings(self, settings_path, tmp_path) -> None:
        target = tmp_path / "notes.txt"
        with patch("vimcore.ui.app.ModalEditorApp") as app_cls:
            assert main(["--no-vim", "--no-clipboard", str(target)]) == 0
        settings = app_cls.call_args.kwargs["settings"]
        assert settings.vim_enabled is False
        assert settings.system_clipboard is False
        assert app_cls.call_args.kwargs["path"] == target
        app_cls.return_value.run.assert_called_once()

    def test_settings_path_flag(self, settings_path, tmp_path) -> None:
        custom = tmp_path / "custom.json"
        with patch("vimcore.ui.app.ModalEditorApp"):
            main(["--settings", str(custom)])
        assert os.environ["VIMCORE_SETTINGS_PATH"] == str(custom)

    def test_directory_is_rejected(self, settings_path, tmp_path) -> None:
        with patch("vimcore.ui.app.ModalEditorApp") as app_cls:
            assert main([str(tmp_path)]) == 2
        app_cls.assert_not_called()
