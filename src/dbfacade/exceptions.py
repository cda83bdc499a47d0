"""
Exception classes raised by the database facades and row accessors.

Errors coming from an adapter (driver errors, constraint violations, lost
connections) are never wrapped; they reach the caller unchanged.
"""
from typing import Any

__all__ = [
    'DatabaseError',
    'TypeMismatchError',
    'NoRowsError',
    'ColumnIndexError',
    'OptionsError',
]


class DatabaseError(Exception):
    """Base class for all dbfacade errors.
    """


class TypeMismatchError(DatabaseError, TypeError):
    """Column value is not of the kind requested by a typed accessor.
    """

    def __init__(self, index: int, expected: str, value: Any,
                 actual: str | None = None) -> None:
        self.index = index
        self.expected = expected
        self.value = value
        self.actual = actual or type(value).__name__
        super().__init__(f'Column {index}: expected {expected}, got {self.actual}')


class NoRowsError(DatabaseError, LookupError):
    """Query expected to return a row returned none.
    """

    def __init__(self, statement: str) -> None:
        self.statement = statement
        super().__init__('Query did not return any rows')


class ColumnIndexError(DatabaseError, IndexError):
    """Column index outside the bounds of the row.
    """

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f'Column index {index} out of range for row of length {length}')


class OptionsError(DatabaseError, ValueError):
    """Invalid row options.
    """
