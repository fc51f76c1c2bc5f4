#!/usr/bin/env python3
"""
tomatodo: terminal task list with a pomodoro timer and background music.

This is a thin facade: argument parsing and logging setup live here, the
application itself lives in tui_app.
"""

import argparse
import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError

from config import get_log_file
from .tui_app import cmd_tui, TomatodoTUI
from .tui_themes import THEMES, DEFAULT_THEME

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def app_version() -> str:
    try:
        return pkg_version("tomatodo")
    except PackageNotFoundError:
        return "0.0.0"


def configure_logging(log_file=None) -> logging.Logger:
    """Attach a handler to the package logger.

    The terminal belongs to the TUI, so records go to a file when one is
    configured and are dropped otherwise.
    """
    root = logging.getLogger("tomatodo")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    path = log_file if log_file is not None else get_log_file()
    if path:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)
    else:
        root.addHandler(logging.NullHandler())
    root.propagate = False
    return root


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tomatodo",
        description="Task list, pomodoro timer and music player for the terminal",
    )
    parser.add_argument("--music-dir", dest="music_dir", help="directory scanned for .mp3/.wav files")
    parser.add_argument("--theme", choices=list(THEMES.keys()), default=None, help=f"color palette (default: {DEFAULT_THEME})")
    parser.add_argument("--log-file", dest="log_file", help="write debug log to this file")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.set_defaults(func=cmd_tui)
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        print(app_version())
        return 0
    configure_logging(args.log_file)
    args.app_version = app_version()
    return args.func(args)


__all__ = ["app_version", "build_parser", "configure_logging", "main", "TomatodoTUI"]


if __name__ == "__main__":
    sys.exit(main())
