"""Filesystem listing and metadata helpers for the tree walk."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import MetadataError
from .types import DirectoryChild, EntryKind, EntryMetadata

logger = logging.getLogger(__name__)

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` is a dot-file (``.`` and ``..`` excluded)."""
    return name.startswith(".") and name not in {".", ".."}


def is_executable_mode(mode: int) -> bool:
    """Return whether ``mode`` describes an executable non-directory."""
    if os.name == "nt":
        return False
    return not stat.S_ISDIR(mode) and bool(mode & _EXECUTE_BITS)


def read_metadata(path: Path, follow_symlinks: bool = False) -> EntryMetadata:
    """Stat ``path`` and return its permission metadata.

    Raises ``MetadataError`` when the stat call fails.
    """
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise MetadataError(path, exc) from exc
    return EntryMetadata(mode=st.st_mode, is_executable=is_executable_mode(st.st_mode))


def describe_link(path: Path) -> tuple[str | None, EntryKind | None, bool]:
    """Return ``(readlink text, resolved kind, resolved executable)`` for a symlink.

    The resolved kind is ``None`` for dangling links.
    """
    try:
        target: str | None = os.readlink(path)
    except OSError:
        target = None
    try:
        metadata = read_metadata(path, follow_symlinks=True)
    except MetadataError:
        return target, None, False
    if stat.S_ISDIR(metadata.mode):
        return target, EntryKind.DIRECTORY, False
    return target, EntryKind.REGULAR, metadata.is_executable


def _describe_child(dir_entry: os.DirEntry[str]) -> DirectoryChild:
    """Classify one scandir entry without following symlinks."""
    path = Path(dir_entry.path)
    try:
        is_link = dir_entry.is_symlink()
        is_dir = not is_link and dir_entry.is_dir(follow_symlinks=False)
    except OSError:
        is_link = False
        is_dir = False

    metadata: EntryMetadata | None
    try:
        metadata = read_metadata(path)
    except MetadataError as exc:
        logger.debug("Cannot stat %s", exc)
        metadata = None

    if is_link:
        target, target_kind, target_executable = describe_link(path)
        return DirectoryChild(
            name=dir_entry.name,
            path=path,
            kind=EntryKind.SYMLINK,
            metadata=metadata,
            link_target=target,
            link_target_kind=target_kind,
            link_target_executable=target_executable,
        )
    return DirectoryChild(
        name=dir_entry.name,
        path=path,
        kind=EntryKind.DIRECTORY if is_dir else EntryKind.REGULAR,
        metadata=metadata,
    )


def list_directory_children(directory: Path, show_hidden: bool) -> list[DirectoryChild]:
    """List visible children of ``directory`` sorted by name.

    Hidden names are dropped unless ``show_hidden`` is set. ``OSError`` from
    opening or reading the directory itself propagates to the caller.
    """
    children: list[DirectoryChild] = []
    with os.scandir(directory) as entries:
        for dir_entry in entries:
            if not show_hidden and is_hidden_name(dir_entry.name):
                continue
            children.append(_describe_child(dir_entry))
    children.sort(key=lambda child: child.name)
    return children


__all__ = [
    "is_hidden_name",
    "is_executable_mode",
    "read_metadata",
    "describe_link",
    "list_directory_children",
]
