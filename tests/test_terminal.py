"""Tests for terminal raw-mode acquisition and release."""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from treeprompt.terminal import TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_toggle_raw_mode_and_cursor(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("treeprompt.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "treeprompt.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("treeprompt.terminal.os.write") as write_mock, mock.patch(
            "treeprompt.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=2)
            controller.enable_prompt_mode()
            controller.disable_prompt_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list, [mock.call(2, b"\x1b[?25l"), mock.call(2, b"\x1b[?25h")])
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("treeprompt.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_prompt_mode") as enable_mock, mock.patch.object(
            controller, "disable_prompt_mode"
        ) as disable_mock:
            with self.assertRaises(KeyboardInterrupt):
                with controller.raw_mode():
                    raise KeyboardInterrupt

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()


if __name__ == "__main__":
    unittest.main()
