"""Command-line front door for treeprompt.

Parses CLI options, merges them with persisted defaults, and runs one prompt.
The prompt paints on stderr so the selected path on stdout can be captured.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from . import config
from .errors import PromptError
from .runtime import run_prompt
from .session import DEFAULT_MESSAGE, DEFAULT_PAGE_SIZE, PromptOptions
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a directory tree and print the path of the chosen file relative to it."
    )
    parser.add_argument("base_path", nargs="?", default=None, help="Root directory. Defaults to current directory.")
    parser.add_argument("-m", "--message", default=DEFAULT_MESSAGE, help="Question shown above the list.")
    parser.add_argument(
        "-a",
        "--all",
        dest="allow_dot_files",
        action="store_true",
        default=None,
        help="Show dotfiles.",
    )
    parser.add_argument("--page-size", type=_positive_int, default=None, help="Rows shown before scrolling.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--save-defaults", action="store_true", help="Remember --all, --page-size and --theme.")
    parser.add_argument("--log-file", default=None, help="Write debug logging to this file.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Log level used with --log-file.",
    )
    return parser


def configure_logging(log_file: str | None, level: str) -> None:
    """Send log records to ``log_file``; nothing is logged to the terminal."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the prompt, and print the selected relative path."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    allow_dot_files = args.allow_dot_files if args.allow_dot_files is not None else config.load_allow_dot_files()
    page_size = args.page_size or config.load_page_size() or DEFAULT_PAGE_SIZE
    theme_name = args.theme or config.load_theme_name()
    if args.save_defaults:
        config.save_defaults(allow_dot_files, page_size, args.theme)

    stdin_fd = sys.stdin.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("treeprompt needs an interactive terminal on stdin.")

    options = PromptOptions(
        base_path=args.base_path or os.getcwd(),
        allow_dot_files=allow_dot_files,
        page_size=page_size,
        message=args.message,
    )
    try:
        result = run_prompt(
            options,
            stdin_fd,
            sys.stderr.fileno(),
            theme=resolve_theme(theme_name, no_color=args.no_color),
        )
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except PromptError as exc:
        raise SystemExit(str(exc)) from exc

    sys.stdout.write(result + "\n")


if __name__ == "__main__":
    main()
