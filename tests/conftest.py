"""Shared fixtures for all tests."""

import pytest


@pytest.fixture
def make_table():
    """Factory fixture returning a builder for tables filled with plain rows."""
    from coltab.util.table import Row, Table

    def _make(template, *rows, measurer=None, line_end='\n'):
        t = Table(template, measurer=measurer, line_end=line_end)
        for values in rows:
            t += Row(*values, measurer=t.measurer)
        return t

    return _make


@pytest.fixture
def roman_table(make_table):
    """The numerals table: right-aligned numbers, then letter and name."""
    return make_table(
        '{:>}  ({:<}) {:<}',
        (1, 'I', 'one'),
        (5, 'V', 'five'),
        (10, 'X', 'ten'),
        (50, 'L', 'fifty'),
        (100, 'C', 'one-hundred'),
    )
