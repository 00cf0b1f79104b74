"""Command-line front door for lazytree.

Parses CLI options into a ``TreeConfig`` and prints the tree.
Fatal configuration and root errors exit with a message and status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .app import print_tree
from .config import TreeConfig
from .errors import LazyTreeError
from .tree_model.pattern import compile_include_pattern
from .ui_theme import available_theme_names


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazytree",
        description="List the contents of a directory as a tree.",
    )
    parser.add_argument("dir", nargs="?", default=".", metavar="DIR", help="Directory to list (default: .).")
    parser.add_argument("-a", "--all", dest="show_all", action="store_true", help="Show hidden files.")
    parser.add_argument("-C", dest="color_on", action="store_true", help="Turn colorization on always.")
    parser.add_argument("-n", dest="color_off", action="store_true", help="Turn colorization off always.")
    parser.add_argument(
        "-L",
        "--level",
        dest="max_level",
        type=_nonnegative_int,
        default=None,
        help="Descend only LEVEL directories deep (0 prints only the root).",
    )
    parser.add_argument("-P", dest="include_pattern", metavar="PATTERN", help="List only files matching PATTERN.")
    parser.add_argument(
        "--theme",
        default=None,
        choices=available_theme_names(),
        help="UI theme name.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def config_from_args(args: argparse.Namespace) -> TreeConfig:
    """Build the run settings from parsed arguments.

    Raises ``ConfigError`` for an invalid include pattern.
    """
    include_pattern = None
    if args.include_pattern is not None:
        include_pattern = compile_include_pattern(args.include_pattern)
    return TreeConfig(
        show_hidden=args.show_all,
        max_depth=args.max_level,
        include_pattern=include_pattern,
        use_color=args.color_on or not args.color_off,
        theme_name=args.theme,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for ``DIR``.

    ``argv`` defaults to ``sys.argv[1:]``; tests pass it explicitly.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        config = config_from_args(args)
        print_tree(Path(args.dir), config, sys.stdout)
    except LazyTreeError as exc:
        raise SystemExit(f"lazytree: {exc}") from exc


if __name__ == "__main__":
    main()
