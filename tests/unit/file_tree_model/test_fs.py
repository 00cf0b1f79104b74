"""Tests for directory listing and metadata helpers."""

from __future__ import annotations

import os
import stat
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree.errors import MetadataError
from lazytree.file_tree_model import EntryKind, is_hidden_name, list_directory_children, read_metadata
from lazytree.file_tree_model.fs import is_executable_mode


class ListDirectoryChildrenTests(unittest.TestCase):
    def test_children_sorted_by_name_and_hidden_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ["beta.txt", "Zeta.txt", "alpha.txt", ".env"]:
                (root / name).write_text("x", encoding="utf-8")
            (root / "dir").mkdir()

            visible = list_directory_children(root, show_hidden=False)
            every = list_directory_children(root, show_hidden=True)

            self.assertEqual([child.name for child in visible], ["Zeta.txt", "alpha.txt", "beta.txt", "dir"])
            self.assertEqual([child.name for child in every], [".env", "Zeta.txt", "alpha.txt", "beta.txt", "dir"])
            self.assertEqual([child.kind for child in visible][-1], EntryKind.DIRECTORY)

    def test_missing_directory_raises_oserror(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                list_directory_children(Path(tmp) / "missing", show_hidden=False)

    @unittest.skipIf(os.name == "nt", "POSIX permission bits")
    def test_executable_files_are_flagged(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            script = root / "run.sh"
            script.write_text("#!/bin/sh\n", encoding="utf-8")
            script.chmod(0o755)
            (root / "data.txt").write_text("x", encoding="utf-8")

            children = {child.name: child for child in list_directory_children(root, show_hidden=False)}

            self.assertTrue(children["run.sh"].metadata.is_executable)
            self.assertFalse(children["data.txt"].metadata.is_executable)

    def test_stat_failure_keeps_entry_without_metadata(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "file.txt").write_text("x", encoding="utf-8")

            with mock.patch(
                "lazytree.file_tree_model.fs.read_metadata",
                side_effect=MetadataError(root / "file.txt", PermissionError(13, "Permission denied")),
            ):
                children = list_directory_children(root, show_hidden=False)

            self.assertEqual(len(children), 1)
            self.assertEqual(children[0].name, "file.txt")
            self.assertIsNone(children[0].metadata)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unsupported")
    def test_dangling_symlink_has_no_target_kind(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            try:
                os.symlink("nowhere", root / "broken")
            except OSError:
                self.skipTest("cannot create symlinks")

            (child,) = list_directory_children(root, show_hidden=False)

            self.assertIs(child.kind, EntryKind.SYMLINK)
            self.assertEqual(child.link_target, "nowhere")
            self.assertIsNone(child.link_target_kind)


class MetadataHelperTests(unittest.TestCase):
    def test_hidden_names(self) -> None:
        self.assertTrue(is_hidden_name(".git"))
        self.assertFalse(is_hidden_name("."))
        self.assertFalse(is_hidden_name(".."))
        self.assertFalse(is_hidden_name("visible"))

    @unittest.skipIf(os.name == "nt", "POSIX permission bits")
    def test_directories_are_never_executable(self) -> None:
        self.assertFalse(is_executable_mode(stat.S_IFDIR | 0o755))
        self.assertTrue(is_executable_mode(stat.S_IFREG | 0o700))
        self.assertTrue(is_executable_mode(stat.S_IFREG | 0o001))
        self.assertFalse(is_executable_mode(stat.S_IFREG | 0o644))

    def test_read_metadata_wraps_oserror(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(MetadataError) as ctx:
                read_metadata(Path(tmp) / "missing")
            self.assertIsInstance(ctx.exception.cause, FileNotFoundError)


if __name__ == "__main__":
    unittest.main()
