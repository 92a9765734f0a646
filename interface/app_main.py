#!/usr/bin/env python3
"""
tasklist — terminal to-do list.

The whole list lives in one key of a file-backed store; this module wires the
store, logging and the full-screen UI together.
"""

import argparse
import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError
from pathlib import Path
from typing import Optional, Sequence

from config import get_log_level, get_on_corrupt, get_store_dir, get_user_theme
from core import StoreCorruptionError
from infrastructure.local_storage import LocalStorage
from infrastructure.task_list_store import LocalTaskListStore
from interface.constants import LANG_PACK
from interface.tui_themes import DEFAULT_THEME, THEMES
from logging_setup import setup_logging

logger = logging.getLogger("tasklist.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="tasklist — keyboard-driven to-do list in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--store-dir", dest="store_dir", help="directory holding the task store")
    parser.add_argument("--theme", choices=list(THEMES.keys()), default=None, help="color palette")
    parser.add_argument("--lang", choices=sorted(LANG_PACK.keys()), default=None, help="interface language")
    parser.add_argument(
        "--reset-corrupt",
        dest="reset_corrupt",
        action="store_true",
        help="back up and reset an unreadable store instead of exiting",
    )
    parser.add_argument("--version", action="store_true", help="show version and exit")
    return parser


def resolve_store_dir(args: argparse.Namespace) -> Path:
    explicit = getattr(args, "store_dir", None)
    if explicit:
        return Path(explicit).expanduser()
    return get_store_dir()


def build_store(args: argparse.Namespace) -> LocalTaskListStore:
    on_corrupt = "reset" if getattr(args, "reset_corrupt", False) else get_on_corrupt()
    storage = LocalStorage(resolve_store_dir(args))
    return LocalTaskListStore(storage, on_corrupt=on_corrupt)


def resolve_theme(args: argparse.Namespace) -> str:
    theme = getattr(args, "theme", None) or get_user_theme()
    return theme if theme in THEMES else DEFAULT_THEME


def cmd_tui(args: argparse.Namespace) -> int:
    from interface.tui_app import TodoListTUI

    store = build_store(args)
    try:
        tui = TodoListTUI(store, theme=resolve_theme(args), language=getattr(args, "lang", None))
    except StoreCorruptionError as exc:
        logger.error("Refusing to start on corrupt store: %s", exc)
        print(f"[ERROR] {exc}", file=sys.stderr)
        print("Run with --reset-corrupt to back it up and start with an empty list.", file=sys.stderr)
        return 2
    tui.run()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("tasklist"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    setup_logging(resolve_store_dir(args), get_log_level())
    return cmd_tui(args)


if __name__ == "__main__":
    sys.exit(main())
