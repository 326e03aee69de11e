"""Public package surface for treeprompt.

Exports ``main`` for CLI invocation and ``prompt_for_file`` for embedding the
prompt in other programs. Implementation lives in submodules.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def prompt_for_file(
    base_path,
    *,
    allow_dot_files: bool = False,
    page_size: int = 7,
    message: str = "Select a file",
    theme=None,
) -> str:
    """Run an interactive prompt on stdin/stderr and return the chosen relative path.

    ``theme`` is a ``UITheme``; the default palette is used when omitted.
    """
    import sys

    from .runtime import run_prompt
    from .session import PromptOptions
    from .ui_theme import DEFAULT_THEME

    options = PromptOptions(
        base_path=base_path,
        allow_dot_files=allow_dot_files,
        page_size=page_size,
        message=message,
    )
    return run_prompt(
        options,
        sys.stdin.fileno(),
        sys.stderr.fileno(),
        theme=theme if theme is not None else DEFAULT_THEME,
    )


__all__ = ["main", "prompt_for_file"]
