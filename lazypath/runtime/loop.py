"""Main interactive event loop for a search session.

Each key is fully processed (edit, retrieval, ranking, render) before the next
one is read. Feature logic lives in ``SessionManager``; this module only wires
key reading and rendering around it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..keys import KeyEvent
from ..launcher import SessionManager
from ..session import SessionView


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    read_key: Callable[[], KeyEvent | None]
    render_view: Callable[[SessionView], None]


def run_main_loop(manager: SessionManager, callbacks: RuntimeLoopCallbacks) -> str:
    """Drive the open session until it closes; return the final input text."""
    if manager.session is None:
        return manager.current_input_text()
    callbacks.render_view(manager.session.view())
    while manager.is_open:
        try:
            event = callbacks.read_key()
        except EOFError:
            manager.close()
            break
        if event is None:
            continue
        outcome = manager.handle_key(event)
        if outcome.closed or outcome.view is None:
            break
        callbacks.render_view(outcome.view)
    return manager.current_input_text()
