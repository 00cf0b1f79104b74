"""Immutable per-run settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tree_model.pattern import IncludePattern


@dataclass(frozen=True)
class TreeConfig:
    """Immutable settings for one tree run.

    ``max_depth`` of ``None`` means unbounded and ``0`` surfaces no entries.
    ``include_pattern`` of ``None`` disables pruning entirely.
    """

    show_hidden: bool = False
    max_depth: int | None = None
    include_pattern: IncludePattern | None = None
    use_color: bool = True
    theme_name: str | None = None


__all__ = ["TreeConfig"]
