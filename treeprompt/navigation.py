"""Path-segment stack transitions for committed choices.

A commit pushes an entry name or pops on ``Back`` (a no-op at the root).
The resulting path is then classified: a regular file completes the session,
anything else is treated as a directory to traverse into.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .choices import Back, Entry
from .fs import Filesystem, PathKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Traversal:
    """Non-terminal outcome: list ``path`` next."""

    path: Path
    stack: tuple[str, ...]

    @property
    def depth(self) -> int:
        return len(self.stack)


@dataclass(frozen=True)
class Done:
    """Terminal outcome: ``path`` is the selected file."""

    path: Path
    stack: tuple[str, ...]


NavigationOutcome = Traversal | Done


def resolve_base_path(raw_base_path: str | os.PathLike[str]) -> Path:
    """Make ``raw_base_path`` absolute against the working directory, without following symlinks."""
    return Path(os.path.abspath(os.fspath(raw_base_path)))


def absolute_path(base_path: Path, stack: tuple[str, ...]) -> Path:
    return base_path.joinpath(*stack)


def next_stack(stack: tuple[str, ...], choice: Entry | Back) -> tuple[str, ...]:
    """Apply one commit to ``stack``: pop on ``Back``, push otherwise."""
    if isinstance(choice, Back):
        return stack[:-1] if stack else stack
    return stack + (choice.name,)


def navigate(
    base_path: Path,
    stack: tuple[str, ...],
    choice: Entry | Back,
    filesystem: Filesystem,
) -> NavigationOutcome:
    """Transition ``stack`` by ``choice`` and decide traversal vs completion."""
    new_stack = next_stack(stack, choice)
    target = absolute_path(base_path, new_stack)
    kind = filesystem.classify(target)
    if kind is PathKind.FILE:
        return Done(target, new_stack)
    if kind is not PathKind.DIRECTORY:
        logger.debug("%s classified as %s, continuing as a directory", target, kind.value)
    return Traversal(target, new_stack)


__all__ = [
    "Traversal",
    "Done",
    "NavigationOutcome",
    "resolve_base_path",
    "absolute_path",
    "next_stack",
    "navigate",
]
