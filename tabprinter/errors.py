# errors.py


class TableError(Exception):
    """Base class for table errors."""


class RowLengthError(TableError, ValueError):
    """Raised when a row does not have one cell per declared column."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row length must match columns: expected {expected}, got {actual}")


class TableIOError(TableError):
    """Raised when a table cannot be read from or written to a tabular file."""
