"""Session controller: one key event in, one new ``SessionState`` out.

Events are classified against the current mode and dispatched to selection
movement, the search sub-mode, or the submission router. After completion
every further event is ignored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from .errors import ConfigurationError
from .fs import Filesystem, LocalFilesystem
from .keys import ActionKind, KeyAction, KeyEvent, classify_key
from .navigation import absolute_path, resolve_base_path
from .render import DEFAULT_PAGE_SIZE, PromptView
from .search import apply_search_char, end_search, start_search
from .state import SessionState
from .submission import SubmissionRouter

DEFAULT_MESSAGE = "Select a file"


@dataclass(frozen=True)
class PromptOptions:
    """Construction parameters for one prompt session."""

    base_path: str | os.PathLike[str] | None
    allow_dot_files: bool = False
    page_size: int = DEFAULT_PAGE_SIZE
    message: str = DEFAULT_MESSAGE


def move_selection(state: SessionState, delta: int) -> SessionState:
    """Move the selection by ``delta`` with wrap-around over real choices."""
    length = state.choices.real_length
    if length == 0:
        return state
    return replace(state, selected=(state.selected + delta) % length)


def transition(state: SessionState, action: KeyAction, router: SubmissionRouter) -> SessionState:
    """Apply one classified action to ``state``."""
    if state.answered:
        return state
    kind = action.kind
    if kind is ActionKind.UP:
        return move_selection(state, -1)
    if kind is ActionKind.DOWN:
        return move_selection(state, 1)
    if kind is ActionKind.SEARCH_START:
        return start_search(state)
    if kind is ActionKind.SEARCH_CHAR:
        return apply_search_char(state, action.char)
    if kind is ActionKind.COMMIT:
        if state.is_searching:
            state = end_search(state)
        return router.route(state)
    return state


class SessionController:
    """Owns the live session state and projects it for the renderer."""

    def __init__(self, options: PromptOptions, filesystem: Filesystem | None = None) -> None:
        if not options.base_path:
            raise ConfigurationError("base_path")
        self.options = options
        self.base_path: Path = resolve_base_path(options.base_path)
        self.router = SubmissionRouter(
            self.base_path,
            filesystem if filesystem is not None else LocalFilesystem(),
            allow_dot_files=options.allow_dot_files,
        )
        self.state = self.router.initial_state()

    @property
    def answered(self) -> bool:
        return self.state.answered

    @property
    def result(self) -> str | None:
        return self.state.result

    def handle_key(self, event: KeyEvent) -> SessionState:
        """Classify and apply ``event``; Ctrl-C raises ``KeyboardInterrupt``."""
        if self.state.answered:
            return self.state
        action = classify_key(event, self.state.mode)
        if action.kind is ActionKind.ABORT:
            raise KeyboardInterrupt
        self.state = transition(self.state, action, self.router)
        return self.state

    def current_relative_path(self) -> str:
        relative = os.path.relpath(absolute_path(self.base_path, self.state.stack), self.base_path)
        return "" if relative == os.curdir else relative

    def view(self, first_render: bool = False) -> PromptView:
        state = self.state
        return PromptView(
            question=self.options.message,
            base_path=str(self.base_path),
            current_relative_path=self.current_relative_path(),
            is_answered=state.answered,
            choices=state.choices,
            selected_index=state.selected,
            is_searching=state.is_searching,
            search_term=state.search_term,
            page_size=self.options.page_size,
            first_render=first_render,
        )


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_MESSAGE",
    "PromptOptions",
    "move_selection",
    "transition",
    "SessionController",
]
