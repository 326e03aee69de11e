"""Routes committed choices into traversal or completion.

Traversal rebuilds the choice list and resets the selection. Completion
records the result relative to the base path and freezes the session; any
commit after that leaves the state untouched.
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

from .choices import build_choice_list
from .fs import Filesystem
from .keys import Mode
from .navigation import Done, absolute_path, navigate
from .state import SessionState

logger = logging.getLogger(__name__)


class SubmissionRouter:
    def __init__(self, base_path: Path, filesystem: Filesystem, allow_dot_files: bool = False) -> None:
        self.base_path = base_path
        self.filesystem = filesystem
        self.allow_dot_files = allow_dot_files

    def initial_state(self) -> SessionState:
        """Return the root-directory state a session starts from."""
        return SessionState(choices=build_choice_list(self.base_path, 0, self.allow_dot_files, self.filesystem))

    def relative_result(self, path: Path) -> str:
        return os.path.relpath(path, self.base_path)

    def route(self, state: SessionState) -> SessionState:
        """Commit the currently selected real choice of ``state``."""
        if state.answered:
            logger.debug("commit after completion ignored")
            return state
        choice = state.choices.real_choice_at(state.selected)
        if choice is None:
            logger.debug("commit with nothing selectable in %s ignored", absolute_path(self.base_path, state.stack))
            return state

        outcome = navigate(self.base_path, state.stack, choice, self.filesystem)
        if isinstance(outcome, Done):
            result = self.relative_result(outcome.path)
            logger.info("selected %s", result)
            return replace(
                state,
                stack=outcome.stack,
                mode=Mode.BROWSING,
                search_term="",
                answered=True,
                result=result,
            )

        logger.debug("traversing to %s (depth %d)", outcome.path, outcome.depth)
        choices = build_choice_list(outcome.path, outcome.depth, self.allow_dot_files, self.filesystem)
        return replace(
            state,
            stack=outcome.stack,
            choices=choices,
            selected=0,
            mode=Mode.BROWSING,
            search_term="",
        )
