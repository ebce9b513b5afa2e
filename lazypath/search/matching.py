from __future__ import annotations

FUZZY_FALLOFF = 0.8
FUZZY_MATCH_BONUS = 1.0
FUZZY_AWARD_CAP = 1.0


def to_bytes(text: str) -> bytes:
    """Encode path text for byte-level comparison."""
    return text.encode("utf-8", errors="surrogateescape")


def prefix_matches(candidate: str, text: str) -> bool:
    """Return whether ``candidate`` starts with ``text`` ignoring ASCII case.

    Comparison is on UTF-8 bytes; only ``A``-``Z`` are folded, other bytes
    must match exactly.
    """
    candidate_bytes = to_bytes(candidate)
    text_bytes = to_bytes(text)
    if len(candidate_bytes) < len(text_bytes):
        return False
    # bytes.lower() folds ASCII letters only.
    return candidate_bytes[: len(text_bytes)].lower() == text_bytes.lower()


def fuzzy_score(needle: str | bytes, haystack: str | bytes) -> float:
    """Score ``needle`` as a case-insensitive subsequence of ``haystack``.

    Each match is worth the current award, which grows by the match bonus but
    is capped and then decays by the falloff for every haystack byte visited.
    Matches packed near the start of ``haystack`` therefore score highest.
    An empty needle or a total mismatch scores ``0``.
    """
    if isinstance(needle, str):
        needle = to_bytes(needle)
    if isinstance(haystack, str):
        haystack = to_bytes(haystack)
    needle = needle.lower()
    haystack = haystack.lower()

    score = 0.0
    next_award = 1.0
    i_needle = 0
    i_haystack = 0
    while i_needle < len(needle) and i_haystack < len(haystack):
        if needle[i_needle] == haystack[i_haystack]:
            score += next_award
            next_award += FUZZY_MATCH_BONUS
            i_needle += 1
        next_award = min(FUZZY_AWARD_CAP, next_award * FUZZY_FALLOFF)
        i_haystack += 1
    return score


__all__ = [
    "FUZZY_FALLOFF",
    "FUZZY_MATCH_BONUS",
    "FUZZY_AWARD_CAP",
    "fuzzy_score",
    "prefix_matches",
    "to_bytes",
]
