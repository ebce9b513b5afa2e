"""Unranked candidate retrieval for the current mode.

Normal mode lists the children of the directory being typed. Fuzzy mode walks
the fuzzy root once and then keeps serving that walked list from the mode.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .filesystem import FilesystemGateway
from .mode import NORMAL_MODE, CachedFuzzyMode, Mode, PendingFuzzyMode, validate_mode
from .text_input import directory_prefix

logger = logging.getLogger(__name__)

DEFAULT_FUZZY_MAX_DEPTH = 4


@dataclass(frozen=True)
class Retrieval:
    """Candidates plus the mode they were produced under.

    ``mode`` differs from the requested mode when a fuzzy walk populated the
    cache or when the input left the fuzzy root.
    """

    mode: Mode
    candidates: tuple[str, ...]


class CandidateSource:
    def __init__(self, gateway: FilesystemGateway, fuzzy_max_depth: int = DEFAULT_FUZZY_MAX_DEPTH) -> None:
        self.gateway = gateway
        self.fuzzy_max_depth = fuzzy_max_depth

    def retrieve(self, mode: Mode, input_text: str) -> Retrieval:
        mode = validate_mode(mode, input_text)
        if isinstance(mode, CachedFuzzyMode):
            return Retrieval(mode, mode.files)
        if isinstance(mode, PendingFuzzyMode):
            return self._walk_fuzzy_root(mode)
        return Retrieval(NORMAL_MODE, self._list_directory(input_text))

    def _list_directory(self, input_text: str) -> tuple[str, ...]:
        directory = directory_prefix(input_text)
        try:
            return tuple(self.gateway.list_children(directory))
        except OSError as exc:
            logger.debug("listing %s failed: %s", directory, exc)
            return ()

    def _walk_fuzzy_root(self, mode: PendingFuzzyMode) -> Retrieval:
        try:
            files = tuple(self.gateway.walk(mode.root, self.fuzzy_max_depth))
        except OSError as exc:
            logger.debug("walking %s failed: %s", mode.root, exc)
            return Retrieval(mode, ())
        logger.debug("cached %d files under %s", len(files), mode.root)
        return Retrieval(mode.with_cache(files), files)


__all__ = [
    "DEFAULT_FUZZY_MAX_DEPTH",
    "CandidateSource",
    "Retrieval",
]
