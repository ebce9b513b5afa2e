"""Key interpretation for an active search session.

``interpret`` applies the buffer edit or navigation for one key and reports
whether results must be recomputed plus any session-ending action. Refreshing
is left to the caller so it happens in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..actions import CancelAction, SessionAction, SubmitAction, TrashAction
from ..filesystem import OpenTarget
from ..keys import (
    BACKSPACE,
    CLEAR_MODIFIERS,
    DELETE,
    DOWN,
    ENTER,
    ESCAPE,
    FUZZY_TRIGGER,
    TAB,
    TERMINAL_MODIFIERS,
    UP,
    WORD_MODIFIERS,
    KeyEvent,
    Modifier,
)
from ..session import SessionState
from .key_registry import KeyComboBinding, KeyComboRegistry


@dataclass(frozen=True)
class EditResult:
    buffer_changed: bool
    action: SessionAction | None = None


NAVIGATION = EditResult(buffer_changed=False)
EDITED = EditResult(buffer_changed=True)


def _without_shift(combo: str) -> str:
    return combo.replace("SHIFT+", "")


def _navigate(session: SessionState, delta: int) -> EditResult:
    session.move_selection(delta)
    return NAVIGATION


def _complete(session: SessionState) -> EditResult:
    session.complete_selection()
    session.exit_fuzzy_mode()
    return EDITED


def _submit(session: SessionState, event: KeyEvent) -> EditResult:
    session.complete_selection()
    # "/path/to/name " creates "name" even when a longer sibling would complete.
    session.buffer.strip_trailing_whitespace()
    target = OpenTarget.TERMINAL if event.has_any(TERMINAL_MODIFIERS) else OpenTarget.DEFAULT
    return EditResult(buffer_changed=True, action=SubmitAction(session.text, target))


def _trash(session: SessionState) -> EditResult:
    session.complete_selection()
    return EditResult(buffer_changed=True, action=TrashAction(session.text))


def _backspace(session: SessionState, event: KeyEvent) -> EditResult:
    if event.has_any(CLEAR_MODIFIERS):
        session.buffer.delete_all()
    elif event.has_any(WORD_MODIFIERS):
        session.buffer.delete_back_word()
    else:
        session.buffer.delete_back_plain()
    return EDITED


def _enter_fuzzy(session: SessionState) -> EditResult:
    session.enter_fuzzy_mode()
    return EDITED


def _append(session: SessionState, event: KeyEvent) -> EditResult:
    if event.has_any(Modifier.CONTROL | Modifier.ALT | Modifier.SUPER):
        return NAVIGATION
    for ch in event.key:
        session.buffer.append_char(ch)
    session.leave_fuzzy_root_if_needed()
    return EDITED


def build_key_registry(session: SessionState, event: KeyEvent) -> KeyComboRegistry[EditResult]:
    """Bindings for ``session``; handlers close over ``event`` for its modifiers."""
    return KeyComboRegistry[EditResult](normalize=_without_shift).register_bindings(
        KeyComboBinding((UP,), lambda: _navigate(session, -1)),
        KeyComboBinding((DOWN,), lambda: _navigate(session, 1)),
        KeyComboBinding((TAB,), lambda: _complete(session)),
        KeyComboBinding((ENTER, KeyEvent(ENTER, TERMINAL_MODIFIERS).combo()), lambda: _submit(session, event)),
        KeyComboBinding((ESCAPE,), lambda: EditResult(buffer_changed=False, action=CancelAction())),
        KeyComboBinding((DELETE,), lambda: _trash(session)),
        KeyComboBinding((FUZZY_TRIGGER.combo(),), lambda: _enter_fuzzy(session)),
    )


def interpret(session: SessionState, event: KeyEvent) -> EditResult:
    """Apply ``event`` to ``session`` without recomputing results."""
    session.message = ""
    if event.key == BACKSPACE:
        return _backspace(session, event)
    result = build_key_registry(session, event).dispatch(event.combo())
    if result is not None:
        return result
    if event.is_named:
        return NAVIGATION
    return _append(session, event)


__all__ = [
    "EditResult",
    "build_key_registry",
    "interpret",
]
