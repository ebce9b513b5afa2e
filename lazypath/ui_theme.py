"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the prompt, result rows and status line. They are
resolved by the presenter on each render; search state never depends on them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    prompt_text: str
    prompt_fuzzy_root: str
    cursor: str
    divider: str
    result_dir: str
    result_file: str
    result_hidden: str
    result_selected: str
    selected_marker: str
    status_error: str
    status_hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    prompt_text="\033[1;38;5;252m",
    prompt_fuzzy_root="\033[2;38;5;81m",
    cursor="\033[7m",
    divider="\033[2m",
    result_dir="\033[1;34m",
    result_file="\033[38;5;252m",
    result_hidden="\033[2;38;5;250m",
    result_selected="\033[1;38;5;42m",
    selected_marker="\033[38;5;42m",
    status_error="\033[38;5;203m",
    status_hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    prompt_text="\033[1;38;5;153m",
    prompt_fuzzy_root="\033[2;38;5;110m",
    cursor="\033[7m",
    divider="\033[2;38;5;31m",
    result_dir="\033[1;38;5;45m",
    result_file="\033[38;5;252m",
    result_hidden="\033[2;38;5;110m",
    result_selected="\033[1;38;5;39m",
    selected_marker="\033[38;5;39m",
    status_error="\033[38;5;215m",
    status_hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    prompt_text="",
    prompt_fuzzy_root="",
    cursor="",
    divider="",
    result_dir="",
    result_file="",
    result_hidden="",
    result_selected="",
    selected_marker="",
    status_error="",
    status_hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
