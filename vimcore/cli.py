#!/usr/bin/env python3
"""vimcore - edit a file with vim-style modal keys in the terminal."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vimcore",
        description="A modal vim-style text editor for the terminal",
    )
    parser.add_argument("file", nargs="?", type=Path, help="File to edit")
    parser.add_argument("--no-vim", action="store_true", help="Start with vim keys disabled")
    parser.add_argument(
        "--no-clipboard",
        action="store_true",
        help="Do not mirror yanks and deletes to the system clipboard",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write debug logging to ~/.vimcore/debug.log",
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help="Path to settings JSON file (overrides ~/.vimcore/settings.json)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = build_parser().parse_args(argv)

    if args.settings:
        os.environ["VIMCORE_SETTINGS_PATH"] = str(args.settings)
    if args.debug:
        from .stores.base import CONFIG_DIR

        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            level=logging.DEBUG,
            filename=CONFIG_DIR / "debug.log",
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    from .config import load_settings
    from .ui.app import ModalEditorApp

    settings = load_settings()
    if args.no_vim:
        settings.vim_enabled = False
    if args.no_clipboard:
        settings.system_clipboard = False

    if args.file is not None and args.file.is_dir():
        print(f"vimcore: {args.file} is a directory", file=sys.stderr)
        return 2

    app = ModalEditorApp(path=args.file, settings=settings)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
