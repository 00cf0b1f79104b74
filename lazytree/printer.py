"""Styled output of rendered tree lines and the summary counts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from .file_tree_model.types import Entry, EntryKind
from .ui_theme import PLAIN_THEME, UITheme

UNREADABLE_MARKER = "[error opening dir]"
LINK_ARROW = " -> "


@dataclass
class Summary:
    """Running directory/file counts; the root is never counted."""

    directory_count: int = 0
    file_count: int = 0

    def record(self, entry: Entry) -> None:
        if entry.kind is EntryKind.DIRECTORY:
            self.directory_count += 1
        else:
            self.file_count += 1

    @property
    def total(self) -> int:
        return self.directory_count + self.file_count


def format_summary(summary: Summary) -> str:
    """Return the ``N directories, M files`` summary text."""
    return f"{summary.directory_count} directories, {summary.file_count} files"


def _link_target_color(entry: Entry, theme: UITheme) -> str:
    if entry.link_target_kind is EntryKind.DIRECTORY:
        return theme.tree_dir
    if entry.link_target_executable:
        return theme.tree_exec
    return ""


def format_entry_name(entry: Entry, theme: UITheme = PLAIN_THEME) -> str:
    """Render the name part of one line, styled by entry kind."""
    if entry.kind is EntryKind.UNREADABLE:
        return f"{entry.name} {UNREADABLE_MARKER}"

    if entry.kind is EntryKind.SYMLINK:
        if entry.metadata is None:
            if entry.link_target is None:
                return entry.name
            return f"{entry.name}{LINK_ARROW}{entry.link_target}"
        name = theme.paint(entry.name, theme.tree_link)
        if entry.link_target is None:
            return name
        target = theme.paint(entry.link_target, _link_target_color(entry, theme))
        return f"{name}{LINK_ARROW}{target}"

    if entry.metadata is None:
        return entry.name
    if entry.kind is EntryKind.DIRECTORY:
        return theme.paint(entry.name, theme.tree_dir)
    if entry.is_executable:
        return theme.paint(entry.name, theme.tree_exec)
    return entry.name


class LinePrinter:
    """Writes tree lines to ``stream`` and accumulates a ``Summary``."""

    def __init__(self, stream: TextIO, theme: UITheme = PLAIN_THEME) -> None:
        self.stream = stream
        self.theme = theme
        self.summary = Summary()

    def print_root(self, display_name: str, is_dir: bool) -> None:
        name = self.theme.paint(display_name, self.theme.tree_dir) if is_dir else display_name
        self.stream.write(f"{name}\n")

    def print_entry(self, prefix: str, entry: Entry) -> None:
        self.stream.write(f"{prefix}{format_entry_name(entry, self.theme)}\n")
        self.summary.record(entry)

    def print_summary(self) -> None:
        self.stream.write(f"\n{format_summary(self.summary)}\n")


__all__ = [
    "UNREADABLE_MARKER",
    "Summary",
    "format_summary",
    "format_entry_name",
    "LinePrinter",
]
