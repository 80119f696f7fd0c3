"""Aligned tables of monospaced text.

A table is built from a format template such as ``'{:>}  {:<}'``: each
``{:X}`` placeholder is a column aligned left (``<``), right (``>``) or
centered (``^``), and everything else is copied between the columns as is.

    t = Table('{:>}  ({:<}) {:<}')
    t += Row(1, 'I', 'one')
    t += Heading('Big ones')
    t += Row(100, 'C', 'one-hundred')
    print(t, end='')

Every column is padded to the width of its widest cell. Widths are measured
in terminal columns, with SGR colour codes counted as zero.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable, Optional, Union

from coltab import constants
from coltab.util.column_spec import Alignment, Column, FormatSpec
from coltab.util.errors import ColumnCountMismatch
from coltab.util.width import UNICODE, WidthMeasurer

_FILLER = ' '


class Cell:
    __slots__ = ('content', 'width')

    def __init__(self, content: str, width: int):
        self.content = content
        self.width = width

    def __repr__(self):
        return f'Cell({self.content!r}, width={self.width})'


class Row:
    """A data row. Cell widths are measured as cells are added."""

    def __init__(self, *values, measurer: Optional[WidthMeasurer] = None):
        self.measurer = measurer or UNICODE
        self.cells = []
        for value in values:
            self.add_cell(value)

    @classmethod
    def from_cells(cls, values: Iterable, measurer: Optional[WidthMeasurer] = None) -> Row:
        return cls(*values, measurer=measurer)

    def add_cell(self, value) -> Row:
        content = str(value)
        self.cells.append(Cell(content, self.measurer.width(content)))
        return self

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __repr__(self):
        return f'Row({", ".join(repr(c.content) for c in self.cells)})'


class Heading:
    """A line written as is, spanning the whole table."""

    __slots__ = ('text',)

    def __init__(self, text: str):
        self.text = str(text)

    def __repr__(self):
        return f'Heading({self.text!r})'


Entry = Union[Row, Heading]


def row(*values, measurer: Optional[WidthMeasurer] = None) -> Row:
    """Shorthand for ``Row().add_cell(a).add_cell(b)...``."""
    r = Row(measurer=measurer)
    for value in values:
        r.add_cell(value)
    return r


def pad(cell: Cell, width: int, alignment: Alignment, trailing: bool = True) -> str:
    """Pad ``cell`` to ``width`` columns; odd center padding goes to the right.

    With ``trailing`` false the filler after the content is left out, which is
    how a column that ends the line avoids trailing whitespace.
    """
    total = max(width - cell.width, 0)
    if alignment is Alignment.RIGHT:
        return _FILLER * total + cell.content
    lead = 0 if alignment is Alignment.LEFT else total // 2
    tail = _FILLER * (total - lead) if trailing else ''
    return _FILLER * lead + cell.content + tail


class Table:
    def __init__(self, template: str, *, measurer: Optional[WidthMeasurer] = None,
                 line_end: str = constants.DEFAULT_LINE_END):
        self.spec = FormatSpec.parse(template)
        self.measurer = measurer or UNICODE
        self.line_end = line_end
        self._entries = []
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def rows(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def append(self, entry: Entry) -> Table:
        if isinstance(entry, Row) and type(entry.measurer) is not type(self.measurer):
            self.logger.warning(f'Row measured with {entry.measurer!r} added to a table '
                                f'using {self.measurer!r}; columns may not line up')
        self._entries.append(entry)
        return self
    __add__ = append

    def add_row(self, row: Row) -> Table:
        return self.append(row)

    def add_heading(self, text: str) -> Table:
        return self.append(Heading(text))

    def new_row(self, *values) -> Row:
        """Return a row measured the same way as this table."""
        return Row(*values, measurer=self.measurer)

    def remove(self, index: int) -> Entry:
        return self._entries.pop(index)

    def set_line_terminator(self, line_end: str) -> Table:
        self.line_end = line_end
        return self

    def column_widths(self) -> list[int]:
        ncols = self.spec.column_count
        widths = [0] * ncols
        for index, entry in enumerate(self._entries):
            if isinstance(entry, Heading):
                continue
            if len(entry) != ncols:
                raise ColumnCountMismatch(index, ncols, len(entry))
            for i, cell in enumerate(entry.cells):
                widths[i] = max(widths[i], cell.width)
        return widths

    def _layout(self, entry: Row, widths: list[int]) -> str:
        parts = []
        last = self.spec.segments[-1]
        for segment in self.spec.segments:
            if isinstance(segment, Column):
                i = segment.index
                parts.append(pad(entry.cells[i], widths[i], segment.alignment,
                                 trailing=segment is not last))
            else:
                parts.append(segment.text)
        return ''.join(parts)

    def render_into(self, writer) -> None:
        widths = self.column_widths()
        self.logger.debug(f'Rendering {len(self._entries)} entries with column widths {widths}')
        for entry in self._entries:
            if isinstance(entry, Heading):
                writer.write(entry.text)
            else:
                writer.write(self._layout(entry, widths))
            writer.write(self.line_end)

    def render(self) -> str:
        buf = io.StringIO()
        self.render_into(buf)
        return buf.getvalue()

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f'Table({self.spec.template!r}, entries={len(self._entries)})'
