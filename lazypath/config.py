"""JSON config loading.

Reads result-cap, fuzzy-walk depth and theme settings from the platform user
config directory. Malformed or missing config silently falls
back to built-in defaults. Nothing is ever written back.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .candidates import DEFAULT_FUZZY_MAX_DEPTH
from .search.ranking import DEFAULT_MAX_RESULTS

APP_NAME = "lazypath"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class LauncherConfig:
    max_results: int = DEFAULT_MAX_RESULTS
    fuzzy_max_depth: int = DEFAULT_FUZZY_MAX_DEPTH
    theme: str | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_positive_int(value: object) -> int | None:
    """Booleans and non-integers are rejected, as are values below 1."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 1:
        return None
    return value


def _coerce_theme_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_launcher_config(
    *,
    max_results: int | None = None,
    fuzzy_max_depth: int | None = None,
    theme: str | None = None,
) -> LauncherConfig:
    """Merge explicit overrides over the config file over built-in defaults."""
    data = load_config()
    defaults = LauncherConfig()
    if max_results is None:
        max_results = _coerce_positive_int(data.get("max_results"))
    if fuzzy_max_depth is None:
        fuzzy_max_depth = _coerce_positive_int(data.get("fuzzy_max_depth"))
    if theme is None:
        theme = _coerce_theme_name(data.get("theme"))
    return LauncherConfig(
        max_results=max_results if max_results is not None else defaults.max_results,
        fuzzy_max_depth=fuzzy_max_depth if fuzzy_max_depth is not None else defaults.fuzzy_max_depth,
        theme=theme,
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "LauncherConfig",
    "load_config",
    "load_launcher_config",
]
