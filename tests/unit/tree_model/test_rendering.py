"""Tests for level-stack updates and connector prefixes."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazytree.file_tree_model import Entry, EntryKind
from lazytree.tree_model.rendering import GLYPHS, LevelStack, render_prefix, update_levels

NBSP = "\u00a0"


def entry(depth: int, is_last: bool) -> Entry:
    return Entry(
        name="x",
        full_path=Path("x"),
        depth=depth,
        is_last_sibling=is_last,
        kind=EntryKind.REGULAR,
    )


class UpdateLevelsTests(unittest.TestCase):
    def test_descending_pushes_and_ascending_truncates(self) -> None:
        levels: list[bool] = []
        update_levels(levels, 1, False)
        self.assertEqual(levels, [True])
        update_levels(levels, 2, False)
        self.assertEqual(levels, [True, True])
        update_levels(levels, 3, True)
        self.assertEqual(levels, [True, True, False])
        update_levels(levels, 1, True)
        self.assertEqual(levels, [False])

    def test_same_depth_overwrites_last_element(self) -> None:
        levels = [True, True]
        update_levels(levels, 2, True)
        self.assertEqual(levels, [True, False])


class RenderPrefixTests(unittest.TestCase):
    def test_empty_stack_renders_nothing(self) -> None:
        self.assertEqual(render_prefix([]), "")

    def test_connectors(self) -> None:
        self.assertEqual(render_prefix([True]), "├── ")
        self.assertEqual(render_prefix([False]), "└── ")

    def test_open_levels_use_bar_and_non_breaking_spaces(self) -> None:
        self.assertEqual(render_prefix([True, False, True]), f"│{NBSP}{NBSP}     ├── ")
        self.assertEqual(GLYPHS.open_level, f"│{NBSP}{NBSP} ")
        self.assertEqual(GLYPHS.closed_level, "    ")

    def test_level_stack_tracks_stream(self) -> None:
        stack = LevelStack()
        prefixes = [
            stack.prefix_for(entry(1, False)),
            stack.prefix_for(entry(2, True)),
            stack.prefix_for(entry(3, True)),
            stack.prefix_for(entry(1, True)),
            stack.prefix_for(entry(2, True)),
        ]
        self.assertEqual(
            prefixes,
            [
                "├── ",
                f"│{NBSP}{NBSP} └── ",
                f"│{NBSP}{NBSP}     └── ",
                "└── ",
                "    └── ",
            ],
        )
        self.assertEqual(len(stack.levels), 2)


if __name__ == "__main__":
    unittest.main()
