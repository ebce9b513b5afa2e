"""Tests for the local filesystem gateway against real temporary trees."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazypath.filesystem import LocalFilesystem, OpenTarget, is_opaque_package, join_child, open_command


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x", encoding="utf-8")


class ListChildrenTests(unittest.TestCase):
    def test_directories_carry_trailing_separator(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "docs").mkdir()
            _touch(root / "a.txt")
            _touch(root / ".hidden")
            base = str(root) + "/"

            children = sorted(LocalFilesystem().list_children(base))

            self.assertEqual(children, sorted([base + ".hidden", base + "a.txt", base + "docs/"]))

    def test_missing_directory_raises_oserror(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                LocalFilesystem().list_children(str(Path(tmp) / "missing") + "/")

    def test_join_child_inserts_separator_when_needed(self) -> None:
        self.assertEqual(join_child("/a/", "b"), "/a/b")
        self.assertEqual(join_child("/a", "b"), "/a/b")


class WalkTests(unittest.TestCase):
    def test_walk_skips_hidden_entries_and_respects_depth(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _touch(root / "top.txt")
            _touch(root / ".secret")
            _touch(root / ".git" / "config")
            _touch(root / "a" / "one.txt")
            _touch(root / "a" / "b" / "two.txt")
            _touch(root / "a" / "b" / "c" / "three.txt")
            _touch(root / "a" / "b" / "c" / "d" / "four.txt")
            base = str(root) + "/"

            files = LocalFilesystem().walk(base, max_depth=3)

            relative = sorted(path[len(base):] for path in files)
            self.assertEqual(relative, ["a/b/two.txt", "a/one.txt", "top.txt"])

            deeper = LocalFilesystem().walk(base, max_depth=4)
            self.assertIn(base + "a/b/c/three.txt", deeper)
            self.assertNotIn(base + "a/b/c/d/four.txt", deeper)

    def test_walk_lists_packages_without_descending(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _touch(root / "Tool.app" / "Contents" / "Info.plist")
            _touch(root / "readme.md")
            base = str(root) + "/"

            files = LocalFilesystem().walk(base, max_depth=4)

            self.assertEqual(sorted(files), [base + "Tool.app/", base + "readme.md"])

    def test_walk_of_missing_root_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                LocalFilesystem().walk(str(Path(tmp) / "gone") + "/", max_depth=4)

    def test_is_opaque_package_matches_known_suffixes(self) -> None:
        self.assertTrue(is_opaque_package("Safari.app"))
        self.assertTrue(is_opaque_package("Foo.FRAMEWORK"))
        self.assertFalse(is_opaque_package("apps"))


class FileActionTests(unittest.TestCase):
    def test_create_file_and_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fs = LocalFilesystem()
            nested = os.path.join(tmp, "x", "y") + "/"
            fs.create_directory(nested)
            self.assertTrue(os.path.isdir(nested))
            target = os.path.join(tmp, "x", "note.txt")
            fs.create_file(target)
            self.assertTrue(fs.exists(target))
            self.assertEqual(Path(target).read_text(encoding="utf-8"), "")

    def test_move_to_trash_delegates_to_send2trash(self) -> None:
        with mock.patch("lazypath.filesystem.send2trash") as trash:
            LocalFilesystem().move_to_trash("/tmp/some/dir/")
        trash.assert_called_once_with("/tmp/some/dir")

    def test_open_spawns_platform_launcher(self) -> None:
        with mock.patch("lazypath.filesystem.sys.platform", "linux"), mock.patch(
            "lazypath.filesystem.subprocess.Popen"
        ) as popen:
            LocalFilesystem().open("/tmp/a.txt")
        args, kwargs = popen.call_args
        self.assertEqual(args[0], ["xdg-open", "/tmp/a.txt"])
        self.assertTrue(kwargs["start_new_session"])


class OpenCommandTests(unittest.TestCase):
    def test_default_open_uses_open_on_macos(self) -> None:
        with mock.patch("lazypath.filesystem.sys.platform", "darwin"):
            self.assertEqual(open_command("/tmp/a.txt", OpenTarget.DEFAULT), (["open", "/tmp/a.txt"], None))

    def test_terminal_open_on_macos_targets_parent_directory(self) -> None:
        with mock.patch("lazypath.filesystem.sys.platform", "darwin"):
            cmd, cwd = open_command("/tmp/proj/a.txt", OpenTarget.TERMINAL)
        self.assertEqual(cmd, ["open", "-a", "Terminal", "/tmp/proj"])
        self.assertIsNone(cwd)

    def test_terminal_open_on_linux_honors_terminal_env(self) -> None:
        with mock.patch("lazypath.filesystem.sys.platform", "linux"), mock.patch.dict(
            os.environ, {"TERMINAL": "kitty --single-instance"}
        ):
            cmd, cwd = open_command("/tmp/proj/", OpenTarget.TERMINAL)
        self.assertEqual(cmd, ["kitty", "--single-instance"])
        self.assertEqual(cwd, "/tmp/proj/")


if __name__ == "__main__":
    unittest.main()
