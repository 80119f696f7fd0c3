"""Display width measurement.

A measurer reports how many terminal columns a string occupies. SGR escape
sequences are removed before measuring, so coloured and plain cells line up.
"""

from __future__ import annotations

from wcwidth import wcswidth, wcwidth

from coltab.util import ansi


class WidthMeasurer:
    """Base class for width strategies."""

    name = None

    def width(self, text: str) -> int:
        return self.measure(ansi.strip_sgr(text))

    def measure(self, text: str) -> int:
        raise NotImplementedError

    def __repr__(self):
        return f'{self.__class__.__name__}()'


class UnicodeWidth(WidthMeasurer):
    """Wide glyphs count 2, combining marks count 0."""

    name = 'unicode'

    def measure(self, text):
        # wcswidth gives up on control characters; drop them, they take no columns.
        return wcswidth(''.join(c for c in text if wcwidth(c) >= 0))


class CharCountWidth(WidthMeasurer):
    """One column per code point."""

    name = 'chars'

    def measure(self, text):
        return len(text)


UNICODE = UnicodeWidth()
CHARS = CharCountWidth()

_MEASURERS = {m.name: m for m in (UNICODE, CHARS)}


def get_measurer(name: str) -> WidthMeasurer:
    try:
        return _MEASURERS[name]
    except KeyError:
        raise ValueError(f'Unknown width strategy `{name}`, expected one of: '
                         f'{", ".join(sorted(_MEASURERS))}')
