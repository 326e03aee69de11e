from __future__ import annotations

from dataclasses import dataclass

from .choices import ChoiceList
from .keys import Mode


@dataclass(frozen=True)
class SessionState:
    stack: tuple[str, ...] = ()
    choices: ChoiceList = ChoiceList()
    selected: int = 0
    mode: Mode = Mode.BROWSING
    search_term: str = ""
    answered: bool = False
    result: str | None = None

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def is_searching(self) -> bool:
        return self.mode is Mode.SEARCHING
