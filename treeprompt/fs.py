"""Filesystem access used by the prompt: directory listing and path classification.

Listing reports every child with symlink/directory flags and leaves filtering
and ordering to the choice builder. Classification never raises: stat failures
are reported as ``PathKind.MISSING``.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class PathKind(Enum):
    """What a path resolves to when inspected without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryChild:
    """One raw directory child as observed by ``os.scandir``."""

    name: str
    is_dir: bool
    is_symlink: bool


class Filesystem(Protocol):
    """Collaborator interface the choice builder and navigation depend on."""

    def list_directory(self, directory: Path) -> tuple[list[DirectoryChild], OSError | None]: ...

    def classify(self, path: Path) -> PathKind: ...


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
    """List children of ``directory`` in scan order.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned; ``children`` is then empty.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_symlink = child.is_symlink()
                except OSError:
                    is_symlink = False
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(
                    DirectoryChild(
                        name=child.name,
                        is_dir=is_dir,
                        is_symlink=is_symlink,
                    )
                )
    except OSError as exc:
        return [], exc
    return children, None


def classify_path(path: Path) -> PathKind:
    """Classify ``path`` with ``lstat``; any stat failure reads as missing."""
    try:
        mode = os.lstat(path).st_mode
    except OSError as exc:
        logger.debug("classify %s failed, treating as not a file: %s", path, exc)
        return PathKind.MISSING
    if stat.S_ISREG(mode):
        return PathKind.FILE
    if stat.S_ISDIR(mode):
        return PathKind.DIRECTORY
    return PathKind.OTHER


class LocalFilesystem:
    """Default ``Filesystem`` backed by the local disk, no caching."""

    def list_directory(self, directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
        return list_directory_children(directory)

    def classify(self, path: Path) -> PathKind:
        return classify_path(path)


__all__ = [
    "PathKind",
    "DirectoryChild",
    "Filesystem",
    "LocalFilesystem",
    "list_directory_children",
    "classify_path",
]
