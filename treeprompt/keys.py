"""Pure key classification for the prompt session.

Maps one decoded ``KeyEvent`` plus the current ``Mode`` to a ``KeyAction``.
The mnemonic ``j``/``k`` bindings only apply while browsing so both letters
can be typed into a search term.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

SEARCH_TRIGGER = "/"
BACKSPACE = "backspace"
_SEARCH_CHAR_RE = re.compile(r"[\w.\-]")
_UP_NAMES = frozenset({"up"})
_DOWN_NAMES = frozenset({"down"})
_BROWSING_UP_NAMES = frozenset({"k"})
_BROWSING_DOWN_NAMES = frozenset({"j"})


class Mode(Enum):
    BROWSING = "browsing"
    SEARCHING = "searching"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded keypress: symbolic name, printable value, and enter flag."""

    name: str = ""
    value: str = ""
    is_enter: bool = False


class ActionKind(Enum):
    UP = "up"
    DOWN = "down"
    SEARCH_START = "search_start"
    SEARCH_CHAR = "search_char"
    COMMIT = "commit"
    ABORT = "abort"
    OTHER = "other"


@dataclass(frozen=True)
class KeyAction:
    """Classified key; ``char`` is set for ``SEARCH_CHAR`` (``BACKSPACE`` or one character)."""

    kind: ActionKind
    char: str = ""


def is_search_char(value: str) -> bool:
    """Return whether ``value`` is one word, dot, or hyphen character."""
    return bool(_SEARCH_CHAR_RE.fullmatch(value))


def classify_key(event: KeyEvent, mode: Mode) -> KeyAction:
    """Classify ``event`` for ``mode`` without touching any state."""
    browsing = mode is Mode.BROWSING
    if event.name == "ctrl_c":
        return KeyAction(ActionKind.ABORT)
    if event.is_enter:
        return KeyAction(ActionKind.COMMIT)
    if event.name in _UP_NAMES or (browsing and event.name in _BROWSING_UP_NAMES):
        return KeyAction(ActionKind.UP)
    if event.name in _DOWN_NAMES or (browsing and event.name in _BROWSING_DOWN_NAMES):
        return KeyAction(ActionKind.DOWN)
    if browsing:
        if event.value == SEARCH_TRIGGER:
            return KeyAction(ActionKind.SEARCH_START)
        return KeyAction(ActionKind.OTHER)
    if event.name == BACKSPACE:
        return KeyAction(ActionKind.SEARCH_CHAR, BACKSPACE)
    if is_search_char(event.value):
        return KeyAction(ActionKind.SEARCH_CHAR, event.value)
    return KeyAction(ActionKind.OTHER)


__all__ = [
    "SEARCH_TRIGGER",
    "BACKSPACE",
    "Mode",
    "KeyEvent",
    "ActionKind",
    "KeyAction",
    "is_search_char",
    "classify_key",
]
