"""Tests for config loading and input sanitization.

Ensures malformed config data falls back to defaults and CLI overrides win.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazypath import config


def _write(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


class LauncherConfigTests(unittest.TestCase):
    def test_missing_file_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazypath.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_launcher_config(), config.LauncherConfig())
        self.assertEqual(config.LauncherConfig().max_results, 18)
        self.assertEqual(config.LauncherConfig().fuzzy_max_depth, 4)

    def test_file_values_are_applied(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write(config_path, {"max_results": 30, "fuzzy_max_depth": 2, "theme": " ocean "})
            with mock.patch("lazypath.config.CONFIG_PATH", config_path):
                loaded = config.load_launcher_config()
        self.assertEqual(loaded, config.LauncherConfig(max_results=30, fuzzy_max_depth=2, theme="ocean"))

    def test_explicit_overrides_win_over_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write(config_path, {"max_results": 30, "fuzzy_max_depth": 2, "theme": "ocean"})
            with mock.patch("lazypath.config.CONFIG_PATH", config_path):
                loaded = config.load_launcher_config(max_results=5, theme="default")
        self.assertEqual(loaded.max_results, 5)
        self.assertEqual(loaded.fuzzy_max_depth, 2)
        self.assertEqual(loaded.theme, "default")

    def test_invalid_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write(config_path, {"max_results": True, "fuzzy_max_depth": 0, "theme": 7})
            with mock.patch("lazypath.config.CONFIG_PATH", config_path):
                loaded = config.load_launcher_config()
        self.assertEqual(loaded, config.LauncherConfig())

    def test_malformed_or_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazypath.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                _write(config_path, [1, 2, 3])
                self.assertEqual(config.load_config(), {})

    def test_loading_never_writes_the_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazypath.config.CONFIG_PATH", config_path):
                config.load_launcher_config(max_results=3)
            self.assertFalse(config_path.exists())


if __name__ == "__main__":
    unittest.main()
