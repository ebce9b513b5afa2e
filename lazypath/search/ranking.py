"""Ordering and capping of matched candidates.

Prefix results are capped first and then sorted with ``candidate_sort_key``.
Fuzzy results are scored in full, sorted by descending score and then capped.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import NamedTuple

from ..text_input import SEPARATOR
from .matching import fuzzy_score, prefix_matches, to_bytes

DEFAULT_MAX_RESULTS = 18


class ScoredCandidate(NamedTuple):
    """Position of a cached file plus its fuzzy score."""

    index: int
    score: float


def is_hidden_path(path: str) -> bool:
    """Return whether the basename of ``path`` starts with ``.``.

    Detected by the last ``.`` in the path being directly preceded by the
    separator, so ``/a/.bashrc`` and ``/a/.cfg/`` are hidden while
    ``/a/b.txt`` is not.
    """
    dot_idx = path.rfind(".")
    if dot_idx <= 0:
        return False
    return path[dot_idx - 1] == SEPARATOR


def is_directory_path(path: str) -> bool:
    return path.endswith(SEPARATOR)


def candidate_sort_key(path: str) -> tuple[bool, bool, bytes]:
    """Visible before hidden, directories before files, then byte order."""
    return (is_hidden_path(path), not is_directory_path(path), to_bytes(path))


def rank_prefix_matches(
    candidates: Iterable[str],
    text: str,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[str]:
    """Filter ``candidates`` by prefix, stop at ``max_results``, then sort."""
    matched: list[str] = []
    if max_results <= 0:
        return matched
    for candidate in candidates:
        if not prefix_matches(candidate, text):
            continue
        matched.append(candidate)
        if len(matched) >= max_results:
            break
    matched.sort(key=candidate_sort_key)
    return matched


def score_fuzzy_candidates(files: Sequence[str], root: str, text: str) -> list[ScoredCandidate]:
    needle = to_bytes(text[len(root):])
    root_len = len(to_bytes(root))
    scored: list[ScoredCandidate] = []
    for idx, path in enumerate(files):
        haystack = to_bytes(path)[root_len:]
        scored.append(ScoredCandidate(idx, fuzzy_score(needle, haystack)))
    return scored


def rank_fuzzy_matches(
    files: Sequence[str],
    root: str,
    text: str,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[str]:
    """Return the ``max_results`` best-scoring files for the text after ``root``.

    Equal scores carry no defined order relative to each other.
    """
    if max_results <= 0:
        return []
    scored = score_fuzzy_candidates(files, root, text)
    scored.sort(key=lambda item: item.score, reverse=True)
    return [files[item.index] for item in scored[:max_results]]


__all__ = [
    "DEFAULT_MAX_RESULTS",
    "ScoredCandidate",
    "candidate_sort_key",
    "is_directory_path",
    "is_hidden_path",
    "rank_fuzzy_matches",
    "rank_prefix_matches",
    "score_fuzzy_candidates",
]
