"""Choice datatypes and the per-directory choice list builder.

A choice list is rebuilt from scratch on every traversal. Real choices are
everything except separators; selection indexes count real choices only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import ListingError
from .fs import DirectoryChild, Filesystem, LocalFilesystem

PARENT_REFERENCE = ".."


@dataclass(frozen=True)
class Entry:
    """A selectable directory child; ``is_dir`` only affects styling."""

    name: str
    is_dir: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class Separator:
    """A non-selectable divider row."""


@dataclass(frozen=True)
class Back:
    """Synthetic selectable row that returns to the parent directory."""


Choice = Entry | Separator | Back

SEPARATOR = Separator()
BACK = Back()


@dataclass(frozen=True)
class ChoiceList:
    """Ordered choices for one directory."""

    choices: tuple[Choice, ...] = ()

    @property
    def real_choices(self) -> tuple[Entry | Back, ...]:
        return tuple(choice for choice in self.choices if not isinstance(choice, Separator))

    @property
    def real_length(self) -> int:
        return len(self.real_choices)

    def real_choice_at(self, index: int) -> Entry | Back | None:
        """Return the real choice at ``index`` or ``None`` when out of range."""
        real = self.real_choices
        if 0 <= index < len(real):
            return real[index]
        return None

    def entry_names(self) -> list[str]:
        return [choice.name for choice in self.choices if isinstance(choice, Entry)]


def is_visible_name(name: str, allow_dot_files: bool) -> bool:
    """Apply the dotfile rule; ``..`` stays hidden even when dotfiles are shown."""
    if allow_dot_files:
        return name != PARENT_REFERENCE
    return not name.startswith(".")


def visible_children(
    directory: Path,
    allow_dot_files: bool,
    filesystem: Filesystem,
) -> list[DirectoryChild]:
    """Return filtered children of ``directory`` sorted by name.

    Raises ``ListingError`` when the directory cannot be read.
    """
    children, scan_error = filesystem.list_directory(directory)
    if scan_error is not None:
        raise ListingError(directory, scan_error)
    visible = [
        child
        for child in children
        if not child.is_symlink and is_visible_name(child.name, allow_dot_files)
    ]
    visible.sort(key=lambda child: child.name)
    return visible


def build_choice_list(
    directory: Path,
    depth: int,
    allow_dot_files: bool = False,
    filesystem: Filesystem | None = None,
) -> ChoiceList:
    """Build the choice list shown for ``directory`` at traversal ``depth``.

    Entries are followed by one separator when any exist. Below the root a
    ``Back`` row framed by separators is appended.
    """
    fs = filesystem if filesystem is not None else LocalFilesystem()
    choices: list[Choice] = [
        Entry(child.name, is_dir=child.is_dir) for child in visible_children(directory, allow_dot_files, fs)
    ]
    if choices:
        choices.append(SEPARATOR)
    if depth > 0:
        choices.extend((SEPARATOR, BACK, SEPARATOR))
    return ChoiceList(tuple(choices))


__all__ = [
    "Entry",
    "Separator",
    "Back",
    "Choice",
    "SEPARATOR",
    "BACK",
    "ChoiceList",
    "is_visible_name",
    "visible_children",
    "build_choice_list",
]
