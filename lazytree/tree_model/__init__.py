"""Tree walking, include-pattern pruning, and connector-prefix rendering.

Defines the lazy ``TreeWalker`` and the ``prune_entries`` stage on top of it.
Also renders connector prefixes from a per-depth level stack.
"""

from __future__ import annotations

from .filtering import entry_matches, prune_entries
from .pattern import IncludePattern, compile_include_pattern, expand_pattern
from .rendering import GLYPHS, LevelStack, TreeGlyphs, render_prefix, update_levels
from .walk import TreeWalker, walk

__all__ = [
    "TreeWalker",
    "walk",
    "IncludePattern",
    "compile_include_pattern",
    "expand_pattern",
    "entry_matches",
    "prune_entries",
    "GLYPHS",
    "LevelStack",
    "TreeGlyphs",
    "render_prefix",
    "update_levels",
]
