"""Terminal presenter for search sessions.

Composes one full ANSI frame per update: the prompt row, a divider, one row
per result (only the part after the shared base is shown) and a status row.
"""

from __future__ import annotations

import os
import sys

from .ansi import clip_ansi_line, tail_fit
from .search.matching import to_bytes
from .search.ranking import is_directory_path, is_hidden_path
from .session import SessionView
from .ui_theme import UITheme

PROMPT_ROWS = 2
STATUS_ROWS = 1
HINT_TEXT = "tab complete  enter open  alt-enter terminal  del trash  ctrl-p fuzzy  esc close"


def result_suffix(result: str, base_length: int) -> str:
    """Return the part of ``result`` after its first ``base_length`` bytes."""
    raw = to_bytes(result)
    if base_length <= 0 or base_length > len(raw):
        return result
    return raw[base_length:].decode("utf-8", errors="surrogateescape")


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def format_prompt_row(view: SessionView, theme: UITheme, width: int) -> str:
    text = view.input_text
    # Keep the end of long paths (and the cursor cell) on screen.
    visible, dropped = tail_fit(text, max(1, width - 1))
    if view.fuzzy:
        root_end = len(text) - len(result_suffix(text, view.base_length))
        root_part = visible[: max(0, root_end - dropped)]
        rest = visible[len(root_part):]
        body = _styled(root_part, theme.prompt_fuzzy_root, theme) + _styled(rest, theme.prompt_text, theme)
    else:
        body = _styled(visible, theme.prompt_text, theme)
    cursor = _styled(" ", theme.cursor, theme) if theme.cursor else "_"
    return body + cursor


def format_result_row(result: str, view: SessionView, selected: bool, theme: UITheme, width: int) -> str:
    label = result_suffix(result, view.base_length)
    if selected:
        marker = _styled(">", theme.selected_marker, theme) + " "
        style = theme.result_selected
    else:
        marker = "  "
        if is_hidden_path(result):
            style = theme.result_hidden
        elif is_directory_path(result):
            style = theme.result_dir
        else:
            style = theme.result_file
    return clip_ansi_line(marker + _styled(label, style, theme), width)


def build_frame(view: SessionView, theme: UITheme, width: int, height: int) -> list[str]:
    """Return screen rows for ``view`` sized to ``width`` x ``height``."""
    width = max(1, width)
    rows = [
        format_prompt_row(view, theme, width),
        _styled("─" * width, theme.divider, theme),
    ]
    result_rows = max(0, height - PROMPT_ROWS - STATUS_ROWS)
    for idx, result in enumerate(view.results[:result_rows]):
        rows.append(format_result_row(result, view, idx == view.selected_index, theme, width))
    while len(rows) < PROMPT_ROWS + result_rows:
        rows.append("")
    if view.message:
        rows.append(clip_ansi_line(_styled(view.message, theme.status_error, theme), width))
    else:
        rows.append(clip_ansi_line(_styled(HINT_TEXT, theme.status_hint, theme), width))
    return rows


def render(view: SessionView, theme: UITheme, width: int, height: int, fd: int | None = None) -> None:
    """Write a full frame for ``view`` to ``fd`` (stdout by default)."""
    out = ["\033[H\033[J"]
    out.append("\r\n".join(build_frame(view, theme, width, height)))
    target_fd = sys.stdout.fileno() if fd is None else fd
    os.write(target_fd, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "HINT_TEXT",
    "build_frame",
    "format_prompt_row",
    "format_result_row",
    "render",
    "result_suffix",
]
