"""Traversal driver: walk, optional pruning, prefix rendering, printing."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .config import TreeConfig
from .file_tree_model.types import Entry
from .printer import LinePrinter, Summary
from .tree_model.filtering import prune_entries
from .tree_model.rendering import LevelStack
from .tree_model.walk import TreeWalker
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)


def root_display_name(root: Path) -> str:
    """Return the root line label: the base name, or the path as given when it has none."""
    return root.name or str(root)


def build_entry_stream(walker: TreeWalker, config: TreeConfig) -> Iterator[Entry]:
    """Wrap ``walker`` in the pruning stage only when a pattern is configured."""
    if config.include_pattern is None:
        return walker
    return prune_entries(walker, config.include_pattern)


def print_tree(root: Path, config: TreeConfig, stream: TextIO) -> Summary:
    """Print the tree below ``root`` to ``stream`` and return the counts.

    Root errors are raised before the first line is written.
    """
    walker = TreeWalker(root, config)
    entries = build_entry_stream(walker, config)
    theme = resolve_theme(config.theme_name, no_color=not config.use_color)
    printer = LinePrinter(stream, theme)
    levels = LevelStack()

    pattern = config.include_pattern.raw if config.include_pattern is not None else None
    logger.debug("Walking %s (max_depth=%s, pattern=%r)", root, config.max_depth, pattern)
    printer.print_root(root_display_name(root), walker.root_is_dir)
    for entry in entries:
        printer.print_entry(levels.prefix_for(entry), entry)
    printer.print_summary()
    return printer.summary


__all__ = [
    "root_display_name",
    "build_entry_stream",
    "print_tree",
]
