"""Connector-glyph prefixes driven by a per-depth level stack."""

from __future__ import annotations

from dataclasses import dataclass

from ..file_tree_model.types import Entry


@dataclass(frozen=True)
class TreeGlyphs:
    """Read-only connector characters."""

    horizontal: str = "─"
    branch: str = "├"
    vertical: str = "│"
    last_branch: str = "└"
    blank: str = "\u00a0"

    @property
    def open_level(self) -> str:
        return f"{self.vertical}{self.blank}{self.blank} "

    @property
    def closed_level(self) -> str:
        return "    "

    def connector(self, is_last: bool) -> str:
        corner = self.last_branch if is_last else self.branch
        return f"{corner}{self.horizontal}{self.horizontal} "


GLYPHS = TreeGlyphs()


def update_levels(levels: list[bool], depth: int, is_last: bool) -> None:
    """Bring ``levels`` in line with an entry at ``depth``.

    Element ``i`` records whether more siblings follow at level ``i + 1``.
    """
    del levels[depth:]
    if len(levels) < depth:
        levels.append(not is_last)
    if levels:
        levels[-1] = not is_last


def render_prefix(levels: list[bool], glyphs: TreeGlyphs = GLYPHS) -> str:
    """Render the prefix for the entry whose state is the last element of ``levels``."""
    if not levels:
        return ""
    parts = [glyphs.open_level if more else glyphs.closed_level for more in levels[:-1]]
    parts.append(glyphs.connector(is_last=not levels[-1]))
    return "".join(parts)


class LevelStack:
    """Sole owner of the level stack for one run.

    ``prefix_for`` must be called once per entry, in stream order.
    """

    def __init__(self, glyphs: TreeGlyphs = GLYPHS) -> None:
        self.glyphs = glyphs
        self.levels: list[bool] = []

    def prefix_for(self, entry: Entry) -> str:
        update_levels(self.levels, entry.depth, entry.is_last_sibling)
        return render_prefix(self.levels, self.glyphs)


__all__ = [
    "TreeGlyphs",
    "GLYPHS",
    "update_levels",
    "render_prefix",
    "LevelStack",
]
