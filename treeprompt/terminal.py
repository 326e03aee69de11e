"""Terminal control for the prompt session.

Owns the raw-mode lifecycle: echo and line buffering off, cursor hidden.
``raw_mode`` restores the saved tty state on every exit path.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_prompt_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, HIDE_CURSOR)

    def disable_prompt_mode(self) -> None:
        os.write(self.stdout_fd, SHOW_CURSOR)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_prompt_mode()
            yield
        finally:
            self.disable_prompt_mode()
