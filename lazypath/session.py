"""Per-session search state read and written on every keystroke.

``SessionState`` composes the input buffer, the current mode, the ranked
result list and the selected index. ``refresh`` runs retrieval, matching and
ranking for the current text; selection moves never trigger retrieval.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .candidates import CandidateSource
from .mode import NORMAL_MODE, Mode, PendingFuzzyMode, fuzzy_root, is_fuzzy, validate_mode
from .search.matching import to_bytes
from .search.ranking import DEFAULT_MAX_RESULTS, rank_fuzzy_matches, rank_prefix_matches
from .text_input import SEPARATOR, InputBuffer, directory_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionView:
    """Snapshot handed to the presenter after each key.

    ``base_length`` counts the leading bytes every result shares with the
    input (the typed directory, or the fuzzy root).
    """

    input_text: str
    base_length: int
    results: tuple[str, ...]
    selected_index: int
    fuzzy: bool = False
    message: str = ""


def clamp_selection(index: int, result_count: int) -> int:
    if result_count <= 0:
        return 0
    return max(0, min(result_count - 1, index))


class SessionState:
    def __init__(
        self,
        source: CandidateSource,
        initial_text: str = SEPARATOR,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        self.source = source
        self.max_results = max_results
        self.buffer = InputBuffer(initial_text or SEPARATOR)
        self.mode: Mode = NORMAL_MODE
        self.results: list[str] = []
        self.selected_index = 0
        self.message = ""

    @property
    def text(self) -> str:
        return self.buffer.text

    def current_input_text(self) -> str:
        return self.buffer.text

    def refresh(self) -> None:
        """Recompute results for the current text and reset the selection."""
        self.buffer.ensure_not_empty()
        text = self.buffer.text
        retrieval = self.source.retrieve(self.mode, text)
        if is_fuzzy(self.mode) and not is_fuzzy(retrieval.mode):
            logger.debug("input %r left fuzzy root, back to normal mode", text)
        self.mode = retrieval.mode

        root = fuzzy_root(self.mode)
        if root is None:
            self.results = rank_prefix_matches(retrieval.candidates, text, self.max_results)
        else:
            self.results = rank_fuzzy_matches(retrieval.candidates, root, text, self.max_results)
        self.selected_index = 0

    def move_selection(self, delta: int) -> bool:
        prev = self.selected_index
        self.selected_index = clamp_selection(self.selected_index + delta, len(self.results))
        return self.selected_index != prev

    def selected_candidate(self) -> str | None:
        if 0 <= self.selected_index < len(self.results):
            return self.results[self.selected_index]
        return None

    def complete_selection(self) -> bool:
        """Copy the selected result into the buffer when one is selected."""
        candidate = self.selected_candidate()
        if candidate is None:
            return False
        return self.buffer.set_text(candidate)

    def enter_fuzzy_mode(self) -> None:
        root = directory_prefix(self.buffer.text)
        logger.debug("entering fuzzy mode at %s", root)
        self.mode = PendingFuzzyMode(root)

    def exit_fuzzy_mode(self) -> None:
        self.mode = NORMAL_MODE

    def leave_fuzzy_root_if_needed(self) -> None:
        self.mode = validate_mode(self.mode, self.buffer.text)

    def base_length(self) -> int:
        root = fuzzy_root(self.mode)
        base = root if root is not None else directory_prefix(self.buffer.text)
        return len(to_bytes(base))

    def view(self) -> SessionView:
        return SessionView(
            input_text=self.buffer.text,
            base_length=self.base_length(),
            results=tuple(self.results),
            selected_index=clamp_selection(self.selected_index, len(self.results)),
            fuzzy=is_fuzzy(self.mode),
            message=self.message,
        )


__all__ = [
    "SessionState",
    "SessionView",
    "clamp_selection",
]
