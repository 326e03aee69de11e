"""Tests for the embeddable ``prompt_for_file`` entry point."""

from __future__ import annotations

import unittest
from unittest import mock

import treeprompt
from treeprompt.ui_theme import DEFAULT_THEME, PLAIN_THEME


class PromptForFileTests(unittest.TestCase):
    def setUp(self) -> None:
        stdin = mock.Mock()
        stdin.fileno.return_value = 0
        stderr = mock.Mock()
        stderr.fileno.return_value = 2
        for patcher in (mock.patch("sys.stdin", stdin), mock.patch("sys.stderr", stderr)):
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_forwards_options_and_descriptors(self) -> None:
        with mock.patch("treeprompt.runtime.run_prompt", return_value="docs/a.md") as run_prompt:
            result = treeprompt.prompt_for_file("docs-root", allow_dot_files=True, page_size=12, message="Which doc?")

        self.assertEqual(result, "docs/a.md")
        options, stdin_fd, stdout_fd = run_prompt.call_args.args
        self.assertEqual(options.base_path, "docs-root")
        self.assertTrue(options.allow_dot_files)
        self.assertEqual(options.page_size, 12)
        self.assertEqual(options.message, "Which doc?")
        self.assertEqual((stdin_fd, stdout_fd), (0, 2))
        self.assertIs(run_prompt.call_args.kwargs["theme"], DEFAULT_THEME)

    def test_theme_is_passed_through(self) -> None:
        with mock.patch("treeprompt.runtime.run_prompt", return_value="x") as run_prompt:
            treeprompt.prompt_for_file("root", theme=PLAIN_THEME)

        self.assertIs(run_prompt.call_args.kwargs["theme"], PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
