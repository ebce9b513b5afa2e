"""Session lifecycle: open, feed keys, run actions, close.

At most one ``SessionState`` exists at a time. Opening a new session discards
the previous one; the last input text seeds the next session's directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .actions import perform_action
from .candidates import DEFAULT_FUZZY_MAX_DEPTH, CandidateSource
from .filesystem import FilesystemGateway
from .input.dispatch import interpret
from .keys import KeyEvent
from .search.ranking import DEFAULT_MAX_RESULTS
from .session import SessionState, SessionView
from .text_input import SEPARATOR, directory_prefix

logger = logging.getLogger(__name__)


def home_directory_text() -> str:
    home = os.path.expanduser("~")
    return home if home.endswith(SEPARATOR) else home + SEPARATOR


@dataclass(frozen=True)
class KeyOutcome:
    """Result of feeding one key to the active session."""

    view: SessionView | None
    closed: bool = False


class SessionManager:
    def __init__(
        self,
        gateway: FilesystemGateway,
        max_results: int = DEFAULT_MAX_RESULTS,
        fuzzy_max_depth: int = DEFAULT_FUZZY_MAX_DEPTH,
    ) -> None:
        self.gateway = gateway
        self.max_results = max_results
        self.source = CandidateSource(gateway, fuzzy_max_depth=fuzzy_max_depth)
        self.session: SessionState | None = None
        self._last_input_text = home_directory_text()

    @property
    def is_open(self) -> bool:
        return self.session is not None

    def open(self, initial_directory: str | None = None) -> SessionView:
        """Start a fresh session seeded with ``initial_directory``.

        Defaults to the directory part of the previous session's input.
        """
        if initial_directory is None:
            seed = directory_prefix(self.current_input_text())
        else:
            seed = os.path.abspath(os.path.expanduser(initial_directory))
            if not seed.endswith(SEPARATOR):
                seed += SEPARATOR
        logger.debug("opening session at %s", seed)
        self.session = SessionState(self.source, seed, max_results=self.max_results)
        self.session.refresh()
        return self.session.view()

    def close(self) -> None:
        if self.session is None:
            return
        self._last_input_text = self.session.current_input_text()
        logger.debug("closing session at %s", self._last_input_text)
        self.session = None

    def current_input_text(self) -> str:
        if self.session is not None:
            return self.session.current_input_text()
        return self._last_input_text

    def handle_key(self, event: KeyEvent) -> KeyOutcome:
        """Interpret ``event``, refresh when the text changed, run any action."""
        session = self.session
        if session is None:
            return KeyOutcome(view=None, closed=True)

        result = interpret(session, event)
        if result.buffer_changed:
            session.refresh()
        if result.action is not None:
            outcome = perform_action(self.gateway, result.action)
            if outcome.closed:
                self.close()
                return KeyOutcome(view=None, closed=True)
            session.message = outcome.error or ""
        return KeyOutcome(view=session.view())


__all__ = [
    "KeyOutcome",
    "SessionManager",
    "home_directory_text",
]
