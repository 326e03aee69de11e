"""In-memory filesystem used to drive listing and navigation tests."""

from __future__ import annotations

from pathlib import Path

from treeprompt.fs import DirectoryChild, PathKind


class FakeFilesystem:
    """Directories map to child specs ``(name, is_dir, is_symlink)`` in listing order."""

    def __init__(self, tree: dict[Path, list[tuple[str, bool, bool]]], files: set[Path] | None = None) -> None:
        self.tree = tree
        self.files = files or set()
        self.listed: list[Path] = []

    def list_directory(self, directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
        self.listed.append(directory)
        if directory not in self.tree:
            return [], FileNotFoundError(2, "No such file or directory", str(directory))
        return [
            DirectoryChild(name=name, is_dir=is_dir, is_symlink=is_symlink)
            for name, is_dir, is_symlink in self.tree[directory]
        ], None

    def classify(self, path: Path) -> PathKind:
        if path in self.files:
            return PathKind.FILE
        if path in self.tree:
            return PathKind.DIRECTORY
        return PathKind.MISSING
