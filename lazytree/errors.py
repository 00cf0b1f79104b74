"""Error taxonomy for tree rendering.

Configuration and root errors are fatal and surface before any output.
Per-entry errors are contained by the walker and reported inline.
"""

from __future__ import annotations

from pathlib import Path


class LazyTreeError(Exception):
    """Base class for errors raised by lazytree."""


class ConfigError(LazyTreeError):
    """Invalid include pattern or option value."""


class RootAccessError(LazyTreeError):
    """Root path is missing or cannot be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class EntryReadError(LazyTreeError):
    """A directory below the root could not be opened."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class MetadataError(LazyTreeError):
    """Stat lookup for a single entry failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


__all__ = [
    "LazyTreeError",
    "ConfigError",
    "RootAccessError",
    "EntryReadError",
    "MetadataError",
]
