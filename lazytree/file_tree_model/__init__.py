"""Domain model for filesystem entries surfaced by the tree walk.

This package contains non-rendering primitives:
- entry datatypes and kinds
- directory listing with sorted, hidden-filtered children
- permission and symlink-target metadata helpers
"""

from __future__ import annotations

from .types import DirectoryChild, Entry, EntryKind, EntryMetadata
from .fs import describe_link, is_executable_mode, is_hidden_name, list_directory_children, read_metadata

__all__ = [
    "DirectoryChild",
    "Entry",
    "EntryKind",
    "EntryMetadata",
    "describe_link",
    "is_executable_mode",
    "is_hidden_name",
    "list_directory_children",
    "read_metadata",
]
