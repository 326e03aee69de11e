"""ANSI-aware width measurement and clipping for prompt lines.

Escape sequences are preserved and take no columns, so colored lines can be
clipped to the terminal width without breaking the in-place repaint.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns; East Asian wide/fullwidth characters
    consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are kept verbatim. A reset is appended when styled
    text was cut so color does not leak into the next line.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    styled = False
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                styled = True
                i = match.end()
                continue
        w = char_display_width(text[i])
        if col + w > max_cols:
            if styled:
                out.append("\x1b[0m")
            break
        out.append(text[i])
        col += w
        i += 1

    return "".join(out)


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "clip_ansi_line",
]
