"""Domain datatypes for entries surfaced by the tree walk."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..errors import EntryReadError


class EntryKind(Enum):
    """Filesystem object classification used for counting and styling."""

    DIRECTORY = "directory"
    REGULAR = "regular"
    SYMLINK = "symlink"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class EntryMetadata:
    """Permission bits observed with ``lstat``."""

    mode: int
    is_executable: bool = False


@dataclass(frozen=True)
class DirectoryChild:
    """One visible child of a listed directory plus cached metadata."""

    name: str
    path: Path
    kind: EntryKind
    metadata: EntryMetadata | None = None
    link_target: str | None = None
    link_target_kind: EntryKind | None = None
    link_target_executable: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class Entry:
    """One filesystem object surfaced by the walk, positioned in the tree.

    ``depth`` is 1 for the root's direct children; the root itself is never
    part of the entry stream. ``is_last_sibling`` is relative to the siblings
    that are actually surfaced, after hidden and pattern filtering.
    """

    name: str
    full_path: Path
    depth: int
    is_last_sibling: bool
    kind: EntryKind
    metadata: EntryMetadata | None = None
    link_target: str | None = None
    link_target_kind: EntryKind | None = None
    link_target_executable: bool = False
    error: EntryReadError | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_executable(self) -> bool:
        return self.metadata is not None and self.metadata.is_executable

    @classmethod
    def from_child(cls, child: DirectoryChild, depth: int, is_last_sibling: bool) -> "Entry":
        """Position a listed child at ``depth`` in the walk."""
        return cls(
            name=child.name,
            full_path=child.path,
            depth=depth,
            is_last_sibling=is_last_sibling,
            kind=child.kind,
            metadata=child.metadata,
            link_target=child.link_target,
            link_target_kind=child.link_target_kind,
            link_target_executable=child.link_target_executable,
        )


__all__ = [
    "EntryKind",
    "EntryMetadata",
    "DirectoryChild",
    "Entry",
]
