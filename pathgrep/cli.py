"""Command-line front door for pathgrep.

Parses CLI options, validates flag combinations, and resolves the origin.
Then runs the finder over the walked entries and writes matches to stdout.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path

from . import __version__
from .errors import ConfigError
from .finder import run
from .options import Options, resolve_origin
from .theme import MatchTheme, available_theme_names, resolve_theme

_LOG_HANDLER: logging.Handler | None = None


class _ThemedFormatter(logging.Formatter):
    """Paint warnings in the theme's warning color and errors in its error color."""

    def __init__(self, theme: MatchTheme) -> None:
        super().__init__("%(message)s")
        self.theme = theme

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        code = self.theme.error if record.levelno >= logging.ERROR else self.theme.warning
        if not code:
            return message
        return f"{code}{message}{self.theme.reset}"


def configure_logging(theme: MatchTheme) -> logging.Logger:
    """Install one stderr handler on the ``pathgrep`` logger.

    Whether per-entry warnings are emitted at all is decided by the finder
    from ``Options.show_warnings``; this only routes and paints them.
    """
    global _LOG_HANDLER

    logger = logging.getLogger("pathgrep")
    if _LOG_HANDLER is not None:
        logger.removeHandler(_LOG_HANDLER)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_ThemedFormatter(theme))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)
    logger.propagate = False
    _LOG_HANDLER = handler
    return logger


def _regex(value: str) -> re.Pattern[str]:
    """argparse type for regular-expression patterns."""
    try:
        return re.compile(value)
    except re.error as exc:
        raise argparse.ArgumentTypeError(f"invalid pattern {value!r}: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathgrep",
        description="Find filesystem entries by name and text patterns, highlighting matches.",
    )
    parser.add_argument("origin", nargs="?", default=".", help="Path to be walked. Defaults to current directory.")
    parser.add_argument("-r", "--recursive", action="store_true", help="Walk recursively.")
    parser.add_argument("-c", "--canonicalize", action="store_true", help="Canonicalize display paths.")

    type_filter = parser.add_mutually_exclusive_group()
    type_filter.add_argument("-f", "--files", action="store_true", help="Only match files.")
    type_filter.add_argument("-d", "--directories", action="store_true", help="Only match directories.")

    parser.add_argument("-i", "--ignore-case", action="store_true", help="Disable pattern case-sensitivity.")
    parser.add_argument("-n", "--name", type=_regex, default=None, metavar="PATTERN", help="Match entries' name to pattern.")
    parser.add_argument(
        "-t",
        "--text",
        type=_regex,
        default=None,
        metavar="PATTERN",
        help="Match entries' readable text to pattern.",
    )

    parser.add_argument("-l", "--list", action="store_true", help="Display entries in a non-line-breaking format.")
    parser.add_argument(
        "-w",
        "--working-dir",
        action="store_true",
        help='Include relative working directory ("./") in entries\' path display.',
    )
    parser.add_argument("--skip-hidden", action="store_true", help="Do not walk hidden entries.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Match theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--warnings", "--debug", action="store_true", help="Show per-entry warnings.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace, no_color: bool = False) -> Options:
    """Resolve parsed arguments into ``Options``.

    Raises ``ConfigError`` when the origin is missing or cannot be canonicalized.
    """
    origin = resolve_origin(Path(args.origin), args.canonicalize)
    return Options(
        origin=origin,
        recursive=args.recursive,
        canonicalize=args.canonicalize,
        files_only=args.files,
        directories_only=args.directories,
        ignore_case=args.ignore_case,
        name_pattern=args.name,
        text_pattern=args.text,
        list_mode=args.list,
        show_warnings=args.warnings,
        working_dir=args.working_dir,
        skip_hidden=args.skip_hidden,
        no_color=no_color,
        theme=args.theme,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print matching entries.

    Fatal configuration errors exit with status 1 after one message; usage
    errors are reported by argparse with status 2.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.directories and args.text is not None:
        parser.error("argument -t/--text: not allowed with argument -d/--directories (directories have no text)")
    if args.list and args.text is not None:
        parser.error("argument -t/--text: not allowed with argument -l/--list (text display needs line breaks)")

    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(args.theme, no_color=no_color)
    logger = configure_logging(resolve_theme(args.theme, no_color=args.no_color or not sys.stderr.isatty()))

    try:
        options = options_from_args(args, no_color=no_color)
        run(options, sys.stdout, theme=theme)
    except ConfigError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
