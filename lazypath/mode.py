"""Search-mode datatypes.

Fuzzy mode is split into two explicit states so a populated file cache can
only exist together with the root it was walked from:

- ``PendingFuzzyMode``: root captured, no walk performed yet
- ``CachedFuzzyMode``: root plus the immutable walked file list
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalMode:
    """Direct-child prefix completion."""


@dataclass(frozen=True)
class PendingFuzzyMode:
    """Recursive fuzzy search whose file list has not been walked yet."""

    root: str

    def with_cache(self, files: tuple[str, ...]) -> CachedFuzzyMode:
        return CachedFuzzyMode(root=self.root, files=files)


@dataclass(frozen=True)
class CachedFuzzyMode:
    """Recursive fuzzy search with the file list walked from ``root``."""

    root: str
    files: tuple[str, ...]


FuzzyMode = PendingFuzzyMode | CachedFuzzyMode
Mode = NormalMode | PendingFuzzyMode | CachedFuzzyMode

NORMAL_MODE = NormalMode()


def fuzzy_root(mode: Mode) -> str | None:
    """Return the fuzzy root for fuzzy modes, otherwise ``None``."""
    if isinstance(mode, (PendingFuzzyMode, CachedFuzzyMode)):
        return mode.root
    return None


def is_fuzzy(mode: Mode) -> bool:
    return fuzzy_root(mode) is not None


def validate_mode(mode: Mode, input_text: str) -> Mode:
    """Drop back to normal mode once ``input_text`` leaves the fuzzy root."""
    root = fuzzy_root(mode)
    if root is None or input_text.startswith(root):
        return mode
    return NORMAL_MODE


__all__ = [
    "NormalMode",
    "PendingFuzzyMode",
    "CachedFuzzyMode",
    "FuzzyMode",
    "Mode",
    "NORMAL_MODE",
    "fuzzy_root",
    "is_fuzzy",
    "validate_mode",
]
