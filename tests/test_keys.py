"""Tests for mode-aware key classification."""

from __future__ import annotations

import unittest

from treeprompt.keys import BACKSPACE, ActionKind, KeyAction, KeyEvent, Mode, classify_key


class KeyClassificationTests(unittest.TestCase):
    def test_arrow_keys_move_in_both_modes(self) -> None:
        for mode in Mode:
            with self.subTest(mode=mode):
                self.assertEqual(classify_key(KeyEvent(name="up"), mode).kind, ActionKind.UP)
                self.assertEqual(classify_key(KeyEvent(name="down"), mode).kind, ActionKind.DOWN)

    def test_mnemonic_letters_move_only_while_browsing(self) -> None:
        k = KeyEvent(name="k", value="k")
        j = KeyEvent(name="j", value="j")

        self.assertEqual(classify_key(k, Mode.BROWSING).kind, ActionKind.UP)
        self.assertEqual(classify_key(j, Mode.BROWSING).kind, ActionKind.DOWN)
        self.assertEqual(classify_key(k, Mode.SEARCHING), KeyAction(ActionKind.SEARCH_CHAR, "k"))
        self.assertEqual(classify_key(j, Mode.SEARCHING), KeyAction(ActionKind.SEARCH_CHAR, "j"))

    def test_slash_starts_search_only_while_browsing(self) -> None:
        slash = KeyEvent(value="/")

        self.assertEqual(classify_key(slash, Mode.BROWSING).kind, ActionKind.SEARCH_START)
        self.assertEqual(classify_key(slash, Mode.SEARCHING).kind, ActionKind.OTHER)

    def test_search_chars_cover_word_dot_hyphen_and_backspace(self) -> None:
        for value in ("a", "Z", "7", "_", ".", "-"):
            with self.subTest(value=value):
                action = classify_key(KeyEvent(value=value), Mode.SEARCHING)
                self.assertEqual(action, KeyAction(ActionKind.SEARCH_CHAR, value))
        self.assertEqual(
            classify_key(KeyEvent(name="backspace"), Mode.SEARCHING),
            KeyAction(ActionKind.SEARCH_CHAR, BACKSPACE),
        )

    def test_non_search_chars_are_other_while_searching(self) -> None:
        for value in (" ", "*", "~", "ab"):
            with self.subTest(value=value):
                self.assertEqual(classify_key(KeyEvent(value=value), Mode.SEARCHING).kind, ActionKind.OTHER)

    def test_letters_do_nothing_while_browsing(self) -> None:
        self.assertEqual(classify_key(KeyEvent(name="a", value="a"), Mode.BROWSING).kind, ActionKind.OTHER)
        self.assertEqual(classify_key(KeyEvent(name="backspace"), Mode.BROWSING).kind, ActionKind.OTHER)

    def test_enter_commits_and_ctrl_c_aborts_in_both_modes(self) -> None:
        for mode in Mode:
            with self.subTest(mode=mode):
                self.assertEqual(classify_key(KeyEvent(name="return", is_enter=True), mode).kind, ActionKind.COMMIT)
                self.assertEqual(classify_key(KeyEvent(name="ctrl_c"), mode).kind, ActionKind.ABORT)


if __name__ == "__main__":
    unittest.main()
