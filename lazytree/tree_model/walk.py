"""Lazy depth-first walk over an explicit stack of directory frames."""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..config import TreeConfig
from ..errors import EntryReadError, MetadataError, RootAccessError
from ..file_tree_model.fs import list_directory_children, read_metadata
from ..file_tree_model.types import DirectoryChild, Entry, EntryKind, EntryMetadata

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """Sorted visible children of one open directory and a cursor into them."""

    children: list[DirectoryChild]
    cursor: int = 0


class TreeWalker:
    """Iterator over ``Entry`` values below ``root`` in pre-order.

    The root is opened when the walker is constructed, so a missing or
    unreadable root raises ``RootAccessError`` before any line is printed.
    Siblings come in ascending name order. A directory below ``max_depth`` is
    listed before its own entry is yielded so that a listing failure can be
    reported as a single ``UNREADABLE`` entry. With ``max_depth`` of 0 the root
    is checked but never listed. Symlinks are never followed.
    The walker is not restartable.
    """

    def __init__(self, root: Path, config: TreeConfig) -> None:
        self.root = root
        self.config = config
        try:
            self.root_metadata: EntryMetadata = read_metadata(root, follow_symlinks=True)
        except MetadataError as exc:
            raise RootAccessError(root, exc.cause.strerror or str(exc.cause)) from exc
        self.root_is_dir = stat.S_ISDIR(self.root_metadata.mode)

        self._frames: list[_Frame] = []
        if self.root_is_dir and self._may_descend(0):
            try:
                children = list_directory_children(root, config.show_hidden)
            except OSError as exc:
                raise RootAccessError(root, exc.strerror or str(exc)) from exc
            self._frames.append(_Frame(children))

    def __iter__(self) -> Iterator[Entry]:
        return self

    def __next__(self) -> Entry:
        while self._frames:
            frame = self._frames[-1]
            if frame.cursor >= len(frame.children):
                self._frames.pop()
                continue

            child = frame.children[frame.cursor]
            is_last = frame.cursor == len(frame.children) - 1
            frame.cursor += 1
            depth = len(self._frames)
            entry = Entry.from_child(child, depth, is_last)

            if child.is_dir and self._may_descend(depth):
                try:
                    grandchildren = list_directory_children(child.path, self.config.show_hidden)
                except OSError as exc:
                    error = EntryReadError(child.path, exc)
                    logger.warning("Cannot open directory %s", error)
                    return Entry(
                        name=child.name,
                        full_path=child.path,
                        depth=depth,
                        is_last_sibling=is_last,
                        kind=EntryKind.UNREADABLE,
                        metadata=child.metadata,
                        error=error,
                    )
                self._frames.append(_Frame(grandchildren))
            return entry
        raise StopIteration

    def _may_descend(self, depth: int) -> bool:
        max_depth = self.config.max_depth
        return max_depth is None or depth < max_depth


def walk(root: Path, config: TreeConfig) -> Iterator[Entry]:
    """Return a fresh lazy walk below ``root``."""
    return TreeWalker(root, config)


__all__ = [
    "TreeWalker",
    "walk",
]
