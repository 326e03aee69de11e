"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens,
then into ``KeyEvent`` values the session understands.
"""

from __future__ import annotations

import os
import select

from .keys import KeyEvent

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_ENTER_TOKENS = frozenset({"ENTER_CR", "ENTER_LF"})
_NAMED_TOKENS = {
    "UP": "up",
    "DOWN": "down",
    "LEFT": "left",
    "RIGHT": "right",
    "BACKSPACE": "backspace",
    "TAB": "tab",
    "ESC": "escape",
    "CTRL_C": "ctrl_c",
    "CTRL_D": "ctrl_d",
    "ENTER_CR": "return",
    "ENTER_LF": "enter",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    """Collect continuation bytes for a multi-byte UTF-8 character."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = lead
    for _ in range(needed):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token; returns ``""`` on timeout or end of input."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch == b"\x03":
        return "CTRL_C"
    if ch == b"\x04":
        return "CTRL_D"
    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"A":
        return "UP"
    if seq == b"B":
        return "DOWN"
    if seq == b"C":
        return "RIGHT"
    if seq == b"D":
        return "LEFT"
    return "ESC"


def key_event_from_token(token: str) -> KeyEvent:
    """Translate a ``read_key`` token into a ``KeyEvent``.

    Letters are named by their lowercase form, so ``K`` is named ``k``.
    """
    if token in _NAMED_TOKENS:
        return KeyEvent(name=_NAMED_TOKENS[token], is_enter=token in _ENTER_TOKENS)
    if len(token) == 1 and token.isalpha():
        return KeyEvent(name=token.lower(), value=token)
    return KeyEvent(value=token)


__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "read_key",
    "key_event_from_token",
]
