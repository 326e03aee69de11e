"""Prompt rendering: a side-effect-free projection of session state to lines.

``render_prompt_lines`` turns a ``PromptView`` into styled lines; ``Screen``
repaints those lines in place on a raw-mode terminal.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass

from .ansi import clip_ansi_line
from .choices import Back, ChoiceList, Entry, Separator
from .ui_theme import DEFAULT_THEME, UITheme, paint

POINTER = "❯"
SEPARATOR_RULE = "─" * 14
BACK_LABEL = "go back a directory"
MORE_CHOICES_HINT = "(Move up and down to reveal more choices)"
SEARCH_HINT = '(Use "/" key to search this directory)'
FIRST_RENDER_HINT = "(Use arrow keys)"
_MAX_POINTER_ROW = 3
DEFAULT_PAGE_SIZE = 7


@dataclass(frozen=True)
class PromptView:
    """Everything the renderer needs for one frame."""

    question: str
    base_path: str
    current_relative_path: str
    is_answered: bool
    choices: ChoiceList
    selected_index: int
    is_searching: bool
    search_term: str
    page_size: int
    first_render: bool = False


def choice_label(choice: Entry | Back) -> str:
    if isinstance(choice, Back):
        return BACK_LABEL
    return choice.name


def choice_rows(choices: ChoiceList, selected_index: int, theme: UITheme) -> tuple[list[str], int]:
    """Render one row per choice; returns ``(rows, selected_row)``."""
    rows: list[str] = []
    selected_row = 0
    real_index = 0
    for choice in choices.choices:
        if isinstance(choice, Separator):
            rows.append("  " + paint(theme, theme.separator, SEPARATOR_RULE))
            continue
        label = choice_label(choice)
        if real_index == selected_index:
            selected_row = len(rows)
            rows.append(paint(theme, theme.selected, f"{POINTER} {label}"))
        elif isinstance(choice, Entry) and choice.is_dir:
            rows.append("  " + paint(theme, theme.directory, label))
        else:
            rows.append(f"  {label}")
        real_index += 1
    return rows, selected_row


def paginate(rows: list[str], selected_row: int, page_size: int) -> tuple[list[str], bool]:
    """Return a cyclic window of ``page_size`` rows around ``selected_row``.

    A non-positive ``page_size`` falls back to ``DEFAULT_PAGE_SIZE``.
    The selected row sits at most a few rows below the top of the window.
    The second value tells whether rows were hidden.
    """
    if page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE
    if len(rows) <= page_size:
        return rows, False
    anchor = min(selected_row, _MAX_POINTER_ROW, page_size - 1)
    top = selected_row - anchor
    return [rows[(top + offset) % len(rows)] for offset in range(page_size)], True


def render_prompt_lines(view: PromptView, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Render ``view`` into display lines, without trailing newlines."""
    question = f"{paint(theme, theme.question_mark, '?')} {paint(theme, theme.question, view.question)} "
    if view.is_answered:
        return [question + paint(theme, theme.answer, view.current_relative_path)]

    if view.first_render:
        question += paint(theme, theme.hint, FIRST_RENDER_HINT)
    lines = [
        question,
        paint(theme, theme.header, " Current directory: ")
        + view.base_path
        + "/"
        + paint(theme, theme.current_path, view.current_relative_path),
    ]

    rows, selected_row = choice_rows(view.choices, view.selected_index, theme)
    visible, truncated = paginate(rows, selected_row, view.page_size)
    lines.extend(visible)
    if truncated:
        lines.append(paint(theme, theme.hint, MORE_CHOICES_HINT))

    if view.is_searching:
        lines.append(paint(theme, theme.search_label, "Search: ") + paint(theme, theme.search_term, view.search_term))
    else:
        lines.append(paint(theme, theme.hint, SEARCH_HINT))
    return lines


DEFAULT_COLUMNS = 80


def terminal_columns(fd: int) -> int:
    """Return the column count of the terminal behind ``fd``, or 80 when it has none."""
    try:
        return os.get_terminal_size(fd).columns
    except OSError:
        return DEFAULT_COLUMNS


class Screen:
    """Repaints prompt frames in place on a raw-mode output descriptor."""

    def __init__(self, fd: int, columns: Callable[[], int] | None = None) -> None:
        self.fd = fd
        self._columns = columns if columns is not None else lambda: terminal_columns(fd)
        self._height = 0

    def render(self, lines: list[str]) -> None:
        # Lines are clipped one column short so the cursor never wraps.
        width = max(1, self._columns() - 1)
        clipped = [clip_ansi_line(line, width) for line in lines]
        out: list[str] = []
        if self._height > 1:
            out.append(f"\r\x1b[{self._height - 1}A")
        elif self._height == 1:
            out.append("\r")
        if self._height:
            out.append("\x1b[J")
        out.append("\r\n".join(clipped))
        os.write(self.fd, "".join(out).encode("utf-8"))
        self._height = len(clipped)

    def done(self) -> None:
        os.write(self.fd, b"\r\n")
        self._height = 0


__all__ = [
    "POINTER",
    "BACK_LABEL",
    "SEARCH_HINT",
    "PromptView",
    "choice_label",
    "choice_rows",
    "paginate",
    "render_prompt_lines",
    "DEFAULT_PAGE_SIZE",
    "terminal_columns",
    "Screen",
]
