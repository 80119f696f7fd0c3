class TableError(Exception):
    """Base class for all table errors."""
    pass


class SpecParseError(TableError):
    """A format template could not be parsed."""

    def __init__(self, template, position, reason):
        self.template = template
        self.position = position
        self.char = template[position] if position < len(template) else None
        where = (f'`{self.char}` at position {position}' if self.char is not None
                 else 'end of template')
        super().__init__(f'Invalid format template {template!r}: {reason} ({where})')
        self.reason = reason


class ColumnCountMismatch(TableError):
    """A data row does not have one cell per template column."""

    def __init__(self, row_index, expected, actual):
        super().__init__(f'Row {row_index} has {actual} cells but the template '
                         f'defines {expected} columns')
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
