"""Exception types raised by the prompt session.

Configuration problems surface at construction; listing failures and a closed
input stream end a running session. The CLI maps all of them to exit messages.
"""

from __future__ import annotations

from pathlib import Path


class PromptError(Exception):
    """Base class for every error the prompt raises on purpose."""


class ConfigurationError(PromptError):
    """A required construction parameter is missing or unusable."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"You must provide a `{parameter}` parameter")
        self.parameter = parameter


class ListingError(PromptError):
    """A directory could not be read while building its choice list."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        super().__init__(f"Cannot list directory {directory}: {cause.strerror or cause}")
        self.directory = directory
        self.cause = cause


class PromptAborted(PromptError):
    """Input ended before a file was selected."""


__all__ = [
    "PromptError",
    "ConfigurationError",
    "ListingError",
    "PromptAborted",
]
