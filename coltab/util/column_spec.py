"""Parsing of column format templates such as ``'{:>}  {:<}'``."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Union

from coltab.util.errors import SpecParseError

logger = logging.getLogger(__name__)


class Alignment(enum.Enum):
    LEFT = '<'
    RIGHT = '>'
    CENTER = '^'


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Column:
    alignment: Alignment
    index: int


Segment = Union[Literal, Column]


class FormatSpec:
    """An ordered, immutable sequence of literal and column segments."""

    def __init__(self, template: str, segments: tuple[Segment, ...]):
        self.template = template
        self.segments = segments
        self.columns = tuple(seg for seg in segments if isinstance(seg, Column))

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @classmethod
    def parse(cls, template: str) -> FormatSpec:
        segments = []
        literal = []
        ncols = 0

        def flush():
            if literal:
                segments.append(Literal(''.join(literal)))
                literal.clear()

        i, n = 0, len(template)
        while i < n:
            c = template[i]
            if c == '{':
                if template.startswith('{{', i):
                    literal.append('{')
                    i += 2
                    continue
                end = template.find('}', i)
                if end == -1:
                    raise SpecParseError(template, i, 'unterminated `{`')
                body = template[i + 1:end]
                if len(body) != 2 or body[0] != ':':
                    raise SpecParseError(template, i, 'expected a placeholder of the form `{:<}`')
                try:
                    alignment = Alignment(body[1])
                except ValueError:
                    raise SpecParseError(template, i + 2, 'unknown alignment character')
                flush()
                segments.append(Column(alignment, ncols))
                ncols += 1
                i = end + 1
            elif c == '}':
                if not template.startswith('}}', i):
                    raise SpecParseError(template, i, 'unmatched `}`')
                literal.append('}')
                i += 2
            else:
                literal.append(c)
                i += 1
        flush()

        if ncols == 0:
            raise SpecParseError(template, len(template), 'template defines no columns')

        spec = cls(template, tuple(segments))
        logger.debug(f'Parsed template {template!r} into {ncols} columns')
        return spec

    def __repr__(self):
        return f'FormatSpec({self.template!r})'
