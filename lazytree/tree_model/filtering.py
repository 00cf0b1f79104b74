"""Include-pattern pruning over a pre-order entry stream.

A directory is surfaced only when some descendant file matches, which is
unknown until its whole subtree has been seen. Each open directory therefore
owns a buffer of surfaced rows; closing a directory either hands its rows to
the parent buffer or discards them. Surfaced entries keep the
``is_last_sibling`` flag the walker gave them, so a file followed only by
pruned siblings still renders with a branch connector.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..file_tree_model.types import Entry, EntryKind
from .pattern import IncludePattern


@dataclass
class _Subtree:
    """One surfaced entry and the surfaced rows below it."""

    entry: Entry
    rows: list[Entry] = field(default_factory=list)

    def flatten(self) -> Iterator[Entry]:
        yield self.entry
        yield from self.rows


@dataclass
class _OpenDirectory:
    """Buffer of surfaced child groups for a directory still being walked."""

    entry: Entry
    groups: list[_Subtree] = field(default_factory=list)

    def close(self) -> _Subtree | None:
        """Return this directory as a group, or ``None`` when nothing below it surfaced."""
        if not self.groups:
            return None
        rows: list[Entry] = []
        for group in self.groups:
            rows.extend(group.flatten())
        return _Subtree(self.entry, rows)


def entry_matches(entry: Entry, pattern: IncludePattern) -> bool:
    """Return whether a non-directory entry is surfaced under ``pattern``."""
    if entry.kind is EntryKind.UNREADABLE:
        return False
    return pattern.matches(entry.name)


def prune_entries(entries: Iterable[Entry], pattern: IncludePattern | None) -> Iterator[Entry]:
    """Filter a pre-order entry stream down to matches and their ancestors.

    With ``pattern`` of ``None`` the stream passes through untouched. Otherwise
    memory is bounded by the subtree of the current top-level entry: a
    top-level group is yielded as soon as it is closed.
    """
    if pattern is None:
        yield from entries
        return

    open_dirs: list[_OpenDirectory] = []

    def attach(group: _Subtree | None) -> Iterator[Entry]:
        if group is None:
            return
        if open_dirs:
            open_dirs[-1].groups.append(group)
            return
        yield from group.flatten()

    for entry in entries:
        # Entries at depth d close every open directory at depth >= d.
        while len(open_dirs) >= entry.depth:
            yield from attach(open_dirs.pop().close())

        if entry.is_dir:
            open_dirs.append(_OpenDirectory(entry))
        elif entry_matches(entry, pattern):
            yield from attach(_Subtree(entry))

    while open_dirs:
        yield from attach(open_dirs.pop().close())


__all__ = [
    "entry_matches",
    "prune_entries",
]
