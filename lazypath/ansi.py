"""ANSI-aware width measurement and row shaping.

Result rows mix color codes with file names that may contain wide or
combining characters; these helpers measure and clip them in terminal cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return the cell width of ``ch`` when drawn at column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the display width of plain (unstyled) ``text``."""
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def _tokens(text: str):
    """Yield ``(is_escape, chunk)`` pairs in order."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        if match.start() > pos:
            yield False, text[pos:match.start()]
        yield True, match.group(0)
        pos = match.end()
    if pos < len(text):
        yield False, text[pos:]


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled row to ``max_cols`` cells, keeping escape sequences.

    Tabs become spaces so the clipped row matches what the terminal draws.
    """
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for is_escape, chunk in _tokens(text):
        if is_escape:
            out.append(chunk)
            continue
        for ch in chunk:
            w = char_display_width(ch, col)
            if col + w > max_cols:
                return "".join(out)
            out.append(" " * w if ch == "\t" else ch)
            col += w
    return "".join(out)


def tail_fit(text: str, max_cols: int) -> tuple[str, int]:
    """Return the longest suffix of plain ``text`` fitting ``max_cols``.

    Also returns how many leading characters were dropped.
    """
    if max_cols <= 0:
        return "", len(text)
    if display_width(text) <= max_cols:
        return text, 0
    start = len(text)
    used = 0
    while start > 0:
        w = char_display_width(text[start - 1], 0)
        if used + w > max_cols:
            break
        used += w
        start -= 1
    return text[start:], start


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "tail_fit",
]
