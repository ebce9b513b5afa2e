"""Editable path text for the search prompt.

The buffer only grows or shrinks at its end: characters are appended one at a
time and removed from the back, either singly, by word, or all at once.
"""

from __future__ import annotations

import unicodedata

SEPARATOR = "/"

_CLASS_WHITESPACE = "space"
_CLASS_SEPARATOR = "separator"
_CLASS_LETTER = "letter"
_CLASS_DIGIT = "digit"
_CLASS_SYMBOL = "symbol"


def is_accepted_char(ch: str) -> bool:
    """Return whether ``ch`` may be typed into the path text.

    Letters, digits, symbols, punctuation and the plain space are accepted.
    Control characters and other whitespace are left for key dispatch.
    """
    if len(ch) != 1:
        return False
    if ch == " ":
        return True
    category = unicodedata.category(ch)
    return category[0] in {"L", "N", "S", "P"}


def char_class(ch: str) -> str:
    """Coarse character class used by whole-word deletion."""
    if ch.isspace():
        return _CLASS_WHITESPACE
    if ch == SEPARATOR:
        return _CLASS_SEPARATOR
    if ch.isdigit():
        return _CLASS_DIGIT
    if ch.isalpha():
        return _CLASS_LETTER
    return _CLASS_SYMBOL


def directory_prefix(text: str) -> str:
    """Return ``text`` up to and including its last separator.

    Text without any separator is returned whole.
    """
    idx = text.rfind(SEPARATOR)
    if idx < 0:
        return text
    return text[: idx + 1]


class InputBuffer:
    """Absolute path text mutated only at its end."""

    def __init__(self, text: str = SEPARATOR) -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def append_char(self, ch: str) -> bool:
        """Append ``ch`` when accepted; return whether the text changed."""
        if not is_accepted_char(ch):
            return False
        self._text += ch
        return True

    def delete_back_plain(self) -> bool:
        if not self._text:
            return False
        self._text = self._text[:-1]
        return True

    def delete_back_word(self) -> bool:
        """Remove a trailing path segment or a trailing run of one char class.

        Text ending with the separator loses that separator and everything
        back to (but not including) the previous separator. Otherwise the
        trailing run of same-class characters is removed.
        """
        if not self._text:
            return False
        if self._text.endswith(SEPARATOR):
            return self.delete_back_segment()
        return self.delete_back_class_run()

    def delete_back_segment(self) -> bool:
        if not self._text:
            return False
        text = self._text
        if text.endswith(SEPARATOR):
            text = text[:-1]
        self._text = text[: text.rfind(SEPARATOR) + 1]
        return True

    def delete_back_class_run(self) -> bool:
        if not self._text:
            return False
        text = self._text
        run_class = char_class(text[-1])
        end = len(text)
        while end > 0 and char_class(text[end - 1]) == run_class:
            end -= 1
            # A separator never forms a run longer than one character.
            if run_class == _CLASS_SEPARATOR:
                break
        self._text = text[:end]
        return True

    def delete_all(self) -> bool:
        if not self._text:
            return False
        self._text = ""
        return True

    def set_text(self, text: str) -> bool:
        if text == self._text:
            return False
        self._text = text
        return True

    def strip_trailing_whitespace(self) -> bool:
        stripped = self._text.rstrip()
        return self.set_text(stripped)

    def ensure_not_empty(self) -> bool:
        """Re-seed an emptied buffer with the root separator."""
        if self._text:
            return False
        self._text = SEPARATOR
        return True


__all__ = [
    "SEPARATOR",
    "InputBuffer",
    "char_class",
    "directory_prefix",
    "is_accepted_char",
]
