"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``KeyEvent`` values.
Handles ESC-sequence timing, Alt (meta) prefixes and UTF-8 continuation bytes.
"""

from __future__ import annotations

import os
import select

from ..keys import BACKSPACE, DELETE, DOWN, ENTER, ESCAPE, LEFT, RIGHT, TAB, UNKNOWN, UP, KeyEvent, Modifier

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_MAX_CSI_LENGTH = 32

_ARROW_FINALS: dict[bytes, str] = {b"A": UP, b"B": DOWN, b"C": RIGHT, b"D": LEFT}
_CSI_MODIFIER_BITS = (
    (1, Modifier.SHIFT),
    (2, Modifier.ALT),
    (4, Modifier.CONTROL),
    (8, Modifier.SUPER),
)

_SINGLE_BYTE_KEYS: dict[bytes, KeyEvent] = {
    b"\t": KeyEvent(TAB),
    b"\r": KeyEvent(ENTER),
    b"\n": KeyEvent(ENTER),
    b"\x7f": KeyEvent(BACKSPACE),
    b"\x08": KeyEvent(BACKSPACE),
    b"\x17": KeyEvent(BACKSPACE, Modifier.CONTROL),
    b"\x15": KeyEvent(BACKSPACE, Modifier.SUPER),
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _next_byte(fd: int, timeout_ms: int | None) -> bytes | None:
    """Return the next byte, ``None`` on timeout; raise ``EOFError`` at end of input."""
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    if timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None
    ch = os.read(fd, 1)
    if not ch:
        raise EOFError("input closed")
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_plain(fd: int, ch: bytes, modifiers: Modifier) -> KeyEvent | None:
    known = _SINGLE_BYTE_KEYS.get(ch)
    if known is not None:
        return KeyEvent(known.key, known.modifiers | modifiers)

    code = ch[0]
    if 1 <= code <= 26:
        # Ctrl+letter arrives as the letter's position in the alphabet.
        return KeyEvent(chr(code + 96), Modifier.CONTROL | modifiers)
    if code < 0x20:
        return None

    raw = ch
    for _ in range(_utf8_length(code) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        raw += nxt
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return KeyEvent(text, modifiers)


def _csi_modifiers(params: list[bytes]) -> Modifier:
    """Decode the xterm ``;<1 + bits>`` modifier parameter."""
    if len(params) < 2 or not params[1].isdigit():
        return Modifier.NONE
    bits = int(params[1]) - 1
    modifiers = Modifier.NONE
    for bit, flag in _CSI_MODIFIER_BITS:
        if bits & bit:
            modifiers |= flag
    return modifiers


def _decode_csi(fd: int) -> KeyEvent:
    """Consume one CSI sequence through its final byte."""
    body = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None or len(body) >= _MAX_CSI_LENGTH:
            return KeyEvent(UNKNOWN)
        code = part[0]
        if 0x40 <= code <= 0x7E:
            break
        if not 0x20 <= code <= 0x3F:
            return KeyEvent(UNKNOWN)
        body += part

    params = body.split(b";")
    modifiers = _csi_modifiers(params)
    if part in _ARROW_FINALS and params[0] in {b"", b"1"}:
        return KeyEvent(_ARROW_FINALS[part], modifiers)
    if part == b"~" and params[0] == b"3":
        return KeyEvent(DELETE, modifiers)
    return KeyEvent(UNKNOWN, modifiers)


def read_key(fd: int, timeout_ms: int | None = None) -> KeyEvent | None:
    """Read one key event from ``fd``.

    Returns ``None`` on timeout or an undecodable byte and raises
    ``EOFError`` once ``fd`` is closed.
    """
    ch = _next_byte(fd, timeout_ms)
    if ch is None:
        return None
    if ch != b"\x1b":
        return _decode_plain(fd, ch, Modifier.NONE)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KeyEvent(ESCAPE)
    if seq == b"\x1b":
        _PENDING_BYTES.append(seq)
        return KeyEvent(ESCAPE)
    if seq == b"[":
        return _decode_csi(fd)
    if seq == b"O":
        tail = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if tail is None:
            return KeyEvent("O", Modifier.ALT)
        return KeyEvent(_ARROW_FINALS.get(tail, UNKNOWN))
    # Meta prefix: Alt+Enter, Alt+Backspace, Alt+letter.
    return _decode_plain(fd, seq, Modifier.ALT)


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "_PENDING_BYTES", "read_key"]
