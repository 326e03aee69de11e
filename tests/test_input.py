"""Regression tests for raw-key decoding and key-event translation."""

from __future__ import annotations

import os
import time
import unittest

from treeprompt import input as input_mod
from treeprompt.keys import KeyEvent


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = self._read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[A\x1b[B\x1bOA", 3), ["UP", "DOWN", "UP"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_control_keys(self) -> None:
        self.assertEqual(
            self._read_all(b"\r\n\x7f\x08\x03", 5),
            ["ENTER_CR", "ENTER_LF", "BACKSPACE", "BACKSPACE", "CTRL_C"],
        )

    def test_multibyte_character_is_one_token(self) -> None:
        self.assertEqual(self._read_all("é/".encode("utf-8"), 2), ["é", "/"])

    def test_timeout_and_end_of_input_return_empty(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertEqual(input_mod.read_key(read_fd, timeout_ms=10), "")
            os.close(write_fd)
            write_fd = -1
            self.assertEqual(input_mod.read_key(read_fd), "")
        finally:
            os.close(read_fd)
            if write_fd >= 0:
                os.close(write_fd)


class KeyEventFromTokenTests(unittest.TestCase):
    def test_named_tokens(self) -> None:
        self.assertEqual(input_mod.key_event_from_token("UP"), KeyEvent(name="up"))
        self.assertEqual(input_mod.key_event_from_token("BACKSPACE"), KeyEvent(name="backspace"))
        self.assertEqual(input_mod.key_event_from_token("CTRL_C"), KeyEvent(name="ctrl_c"))

    def test_enter_tokens_set_enter_flag(self) -> None:
        self.assertTrue(input_mod.key_event_from_token("ENTER_CR").is_enter)
        self.assertTrue(input_mod.key_event_from_token("ENTER_LF").is_enter)

    def test_letters_are_named_lowercase(self) -> None:
        self.assertEqual(input_mod.key_event_from_token("K"), KeyEvent(name="k", value="K"))
        self.assertEqual(input_mod.key_event_from_token("/"), KeyEvent(value="/"))
        self.assertEqual(input_mod.key_event_from_token("."), KeyEvent(value="."))


if __name__ == "__main__":
    unittest.main()
