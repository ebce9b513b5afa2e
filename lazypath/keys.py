"""Key event datatypes shared by the terminal reader and session dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class Modifier(IntFlag):
    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8


# Named tokens for non-printable keys. Printable keys use the character itself.
UP = "UP"
DOWN = "DOWN"
TAB = "TAB"
ENTER = "ENTER"
ESCAPE = "ESC"
BACKSPACE = "BACKSPACE"
DELETE = "DELETE"
LEFT = "LEFT"
RIGHT = "RIGHT"
# Any complete escape sequence without a key of its own.
UNKNOWN = "UNKNOWN"

NAMED_KEYS = frozenset({UP, DOWN, LEFT, RIGHT, TAB, ENTER, ESCAPE, BACKSPACE, DELETE, UNKNOWN})

WORD_MODIFIERS = Modifier.ALT | Modifier.CONTROL
CLEAR_MODIFIERS = Modifier.SUPER
TERMINAL_MODIFIERS = Modifier.ALT


@dataclass(frozen=True)
class KeyEvent:
    """One key press: a key token plus held modifiers."""

    key: str
    modifiers: Modifier = Modifier.NONE

    @property
    def is_named(self) -> bool:
        return self.key in NAMED_KEYS

    def has_any(self, modifiers: Modifier) -> bool:
        return bool(self.modifiers & modifiers)

    def combo(self) -> str:
        """Return a registry token such as ``CONTROL+p`` or ``BACKSPACE``."""
        parts = [flag.name for flag in Modifier if flag and flag in self.modifiers]
        return "+".join([*parts, self.key])


FUZZY_TRIGGER = KeyEvent("p", Modifier.CONTROL)


__all__ = [
    "Modifier",
    "KeyEvent",
    "UP",
    "DOWN",
    "TAB",
    "ENTER",
    "ESCAPE",
    "BACKSPACE",
    "DELETE",
    "LEFT",
    "RIGHT",
    "UNKNOWN",
    "NAMED_KEYS",
    "WORD_MODIFIERS",
    "CLEAR_MODIFIERS",
    "TERMINAL_MODIFIERS",
    "FUZZY_TRIGGER",
]
