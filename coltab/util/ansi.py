"""ANSI SGR escape code helpers for coloured table cells."""

from __future__ import annotations

import re
from collections.abc import Callable

RESET = '\u001b[0m'

# ESC '[' <parameter bytes 0x30-0x3F> 'm'
SGR_PATTERN = re.compile('\u001b\\[[0-?]*m')

BOLD = '\u001b[1m'


def strip_sgr(text: str) -> str:
    """Return ``text`` with every SGR escape sequence removed."""
    return SGR_PATTERN.sub('', text)


def wrap(code: str) -> Callable[[str], str]:
    """Return a callable that paints a string with ``code`` and resets after it."""

    def paint(s: str) -> str:
        return code + s + RESET

    return paint
