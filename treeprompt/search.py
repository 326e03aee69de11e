"""Type-ahead search sub-mode.

Searching is an ordinary mode on ``SessionState``: it starts on the trigger
key, ends when the term empties or on commit, and each non-empty term moves
the selection to the first entry whose name starts with it.
"""

from __future__ import annotations

from dataclasses import replace

from .choices import ChoiceList, Entry
from .keys import BACKSPACE, Mode
from .state import SessionState


def find_prefix_match(choices: ChoiceList, term: str) -> int | None:
    """Return the real-choice index of the first entry starting with ``term``.

    Comparison is case-insensitive. ``Back`` rows never match.
    """
    needle = term.lower()
    for index, choice in enumerate(choices.real_choices):
        if isinstance(choice, Entry) and choice.name.lower().startswith(needle):
            return index
    return None


def start_search(state: SessionState) -> SessionState:
    """Enter searching with an empty term; ignored when already searching."""
    if state.mode is Mode.SEARCHING:
        return state
    return replace(state, mode=Mode.SEARCHING, search_term="")


def end_search(state: SessionState) -> SessionState:
    return replace(state, mode=Mode.BROWSING, search_term="")


def apply_search_char(state: SessionState, char: str) -> SessionState:
    """Append ``char`` (or drop one for backspace) and re-run the prefix match."""
    if state.mode is not Mode.SEARCHING:
        return state
    if char == BACKSPACE:
        term = state.search_term[:-1]
    else:
        term = state.search_term + char
    if not term:
        return end_search(state)

    selected = state.selected
    match = find_prefix_match(state.choices, term)
    if match is not None:
        selected = match
    return replace(state, search_term=term, selected=selected)


__all__ = [
    "find_prefix_match",
    "start_search",
    "end_search",
    "apply_search_char",
]
