"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the prompt chrome: question line, pointer,
separators, and the search footer. ``plain`` is used when color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the prompt renderer."""

    name: str
    reset: str
    question_mark: str
    question: str
    hint: str
    header: str
    current_path: str
    answer: str
    selected: str
    directory: str
    separator: str
    search_label: str
    search_term: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    question_mark="\033[32m",
    question="\033[1m",
    hint="\033[2m",
    header="\033[1m",
    current_path="\033[36m",
    answer="\033[36m",
    selected="\033[36m",
    directory="\033[1;34m",
    separator="\033[2m",
    search_label="\033[1m",
    search_term="\033[36m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    question_mark="\033[38;5;39m",
    question="\033[1;38;5;153m",
    hint="\033[2;38;5;110m",
    header="\033[1;38;5;45m",
    current_path="\033[38;5;117m",
    answer="\033[38;5;45m",
    selected="\033[38;5;45m",
    directory="\033[1;38;5;45m",
    separator="\033[2;38;5;31m",
    search_label="\033[1;38;5;45m",
    search_term="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    question_mark="",
    question="",
    hint="",
    header="",
    current_path="",
    answer="",
    selected="",
    directory="",
    separator="",
    search_label="",
    search_term="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def paint(theme: UITheme, color: str, text: str) -> str:
    """Wrap ``text`` in ``color`` and reset, or return it bare for plain output."""
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "paint",
]
