"""Candidate matching and ranking.

Prefix filtering and fuzzy subsequence scoring live in ``matching``;
ordering and result capping live in ``ranking``.
"""

from __future__ import annotations

from .matching import fuzzy_score, prefix_matches
from .ranking import (
    DEFAULT_MAX_RESULTS,
    ScoredCandidate,
    candidate_sort_key,
    is_hidden_path,
    rank_fuzzy_matches,
    rank_prefix_matches,
)

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "ScoredCandidate",
    "candidate_sort_key",
    "fuzzy_score",
    "is_hidden_path",
    "prefix_matches",
    "rank_fuzzy_matches",
    "rank_prefix_matches",
]
