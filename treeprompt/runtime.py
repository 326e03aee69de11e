"""Interactive event loop for one prompt session.

Reads one key at a time, hands it to the session controller, and repaints
after every event. The terminal is held in raw mode for the whole loop and
released on completion, Ctrl-C, or error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .errors import PromptAborted
from .fs import Filesystem
from .input import key_event_from_token, read_key
from .render import Screen, render_prompt_lines
from .session import PromptOptions, SessionController
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


def run_prompt(
    options: PromptOptions,
    stdin_fd: int,
    stdout_fd: int,
    *,
    theme: UITheme = DEFAULT_THEME,
    filesystem: Filesystem | None = None,
    terminal: TerminalController | None = None,
    screen: Screen | None = None,
    read_key_fn: Callable[[int], str] = read_key,
) -> str:
    """Run the prompt until a file is selected and return its relative path.

    Raises ``ConfigurationError`` before touching the terminal when options are
    invalid, ``ListingError`` when a directory cannot be read, and
    ``PromptAborted`` when input ends first.
    """
    controller = SessionController(options, filesystem)
    logger.debug("prompt started at %s", controller.base_path)
    if terminal is None:
        terminal = TerminalController(stdin_fd, stdout_fd)
    if screen is None:
        screen = Screen(stdout_fd)

    with terminal.raw_mode():
        try:
            screen.render(render_prompt_lines(controller.view(first_render=True), theme))
            skip_next_lf = False
            while not controller.answered:
                token = read_key_fn(stdin_fd)
                if token == "":
                    raise PromptAborted("input closed before a file was selected")
                # A CR LF pair from a pasted line is one enter press.
                if skip_next_lf and token == "ENTER_LF":
                    skip_next_lf = False
                    continue
                skip_next_lf = token == "ENTER_CR"
                controller.handle_key(key_event_from_token(token))
                screen.render(render_prompt_lines(controller.view(), theme))
        finally:
            screen.done()

    return controller.result or ""
