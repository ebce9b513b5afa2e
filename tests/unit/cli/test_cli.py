"""CLI argument handling tests.

Verifies one-shot ``--list`` output, option validation, and how the
interactive launcher is started.
"""

from __future__ import annotations

import argparse
import io
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazypath import cli
from lazypath.config import LauncherConfig


def _make_tree(root: Path) -> str:
    (root / "B").mkdir()
    (root / "B" / "inner.txt").write_text("", encoding="utf-8")
    (root / "a.txt").write_text("", encoding="utf-8")
    (root / ".hidden").write_text("", encoding="utf-8")
    return str(root) + "/"


class CliListTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        config_patch = mock.patch("lazypath.config.CONFIG_PATH", self.root / "missing-config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)
        self.addCleanup(self._tmp.cleanup)

    def _run(self, argv: list[str]) -> list[str]:
        out = io.StringIO()
        with mock.patch.object(sys, "stdout", out):
            cli.main(argv)
        return out.getvalue().splitlines()

    def test_list_prints_ranked_children(self) -> None:
        base = _make_tree(self.root)
        self.assertEqual(self._run(["--list", base]), [base + "B/", base + "a.txt", base + ".hidden"])

    def test_list_filters_by_prefix_and_honors_max_results(self) -> None:
        base = _make_tree(self.root)
        self.assertEqual(self._run(["--list", base + "A"]), [base + "a.txt"])
        self.assertEqual(self._run(["--list", base, "--max-results", "1"]), [base + "B/"])

    def test_list_with_fuzzy_root_walks_subdirectories(self) -> None:
        base = _make_tree(self.root)
        lines = self._run(["--list", base + "inner", "--fuzzy-root", base])
        self.assertEqual(lines[0], base + "B/inner.txt")
        self.assertNotIn(base + ".hidden", lines)

    def test_fuzzy_root_must_prefix_list_text(self) -> None:
        base = _make_tree(self.root)
        with self.assertRaises(SystemExit):
            cli.main(["--list", base, "--fuzzy-root", "/elsewhere/"])

    def test_fuzzy_root_requires_list(self) -> None:
        with self.assertRaises(SystemExit):
            cli.main(["--fuzzy-root", "/tmp/"])

    def test_list_requires_absolute_text(self) -> None:
        with self.assertRaises(SystemExit):
            cli.main(["--list", "relative/path"])

    def test_list_rejects_positional_path(self) -> None:
        with self.assertRaises(SystemExit):
            cli.main([str(self.root), "--list", "/tmp/"])


class CliInteractiveTests(unittest.TestCase):
    def test_launcher_receives_start_directory_and_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "file.txt"
            target.write_text("", encoding="utf-8")
            with mock.patch("lazypath.config.CONFIG_PATH", root / "none.json"), mock.patch(
                "lazypath.cli.os.isatty", return_value=True
            ), mock.patch.object(sys, "stdin", mock.Mock(fileno=lambda: 0)), mock.patch.object(
                sys, "stdout", mock.Mock(fileno=lambda: 1)
            ), mock.patch("lazypath.cli.run_launcher", return_value=str(root) + "/") as run_launcher:
                cli.main([str(target), "--theme", "ocean", "--no-color", "--max-results", "5"])

        run_launcher.assert_called_once()
        start, config = run_launcher.call_args.args
        self.assertEqual(start, str(root) + "/")
        self.assertEqual(config, LauncherConfig(max_results=5, theme="ocean"))
        self.assertTrue(run_launcher.call_args.kwargs["no_color"])

    def test_non_terminal_input_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazypath.config.CONFIG_PATH", Path(tmp) / "none.json"), mock.patch(
                "lazypath.cli.os.isatty", return_value=False
            ), mock.patch.object(sys, "stdin", mock.Mock(fileno=lambda: 0)), mock.patch(
                "lazypath.cli.run_launcher"
            ) as run_launcher:
                with self.assertRaises(SystemExit):
                    cli.main([tmp])
        run_launcher.assert_not_called()

    def test_missing_start_path_exits(self) -> None:
        with self.assertRaises(SystemExit):
            cli.main(["/definitely/not/here/lazypath-test"])


class PositiveIntTests(unittest.TestCase):
    def test_rejects_zero_and_non_integers(self) -> None:
        self.assertEqual(cli._positive_int("3"), 3)
        with self.assertRaises(argparse.ArgumentTypeError):
            cli._positive_int("0")
        with self.assertRaises(argparse.ArgumentTypeError):
            cli._positive_int("x")


if __name__ == "__main__":
    unittest.main()
