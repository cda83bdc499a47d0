"""Typed accessors over rows returned by an adapter.

A `Row` wraps one tuple of column values exactly as the adapter produced it
and narrows individual values to a requested kind on access. A `Rows` wraps
the whole result and builds `Row` objects on demand while iterating.
"""
import logging
import operator
from collections.abc import Iterator, Sequence
from decimal import Decimal
from typing import Any

import pandas as pd
from dbfacade.exceptions import ColumnIndexError, TypeMismatchError
from dbfacade.options import DEFAULT_OPTIONS, RowOptions
from dbfacade.types import Bytes, ColumnValue, is_boolean, is_bytes
from dbfacade.types import is_finite, is_integral, is_null, is_number, is_text
from dbfacade.types import kind_name, to_wide_integer

__all__ = ['Row', 'Rows']

logger = logging.getLogger(__name__)

Number = int | float | Decimal


class Row:
    """One result row with type-checked access by zero-based column index.

    Each typed accessor comes in two forms. The plain form (`string`,
    `number`, `bigint`, `boolean`, `bytes`) raises TypeMismatchError when the
    value is of another kind or is null. The `_nullable` form also accepts a
    null value and returns None for it.

    The only conversion performed is in `bigint`, which widens an integral
    number (such as 42.0 or numpy.int64(42)) to a Python int.

    >>> row = Row((1, 'a', None))
    >>> row.number(0), row.string(1), row.string_nullable(2)
    (1, 'a', None)
    """

    __slots__ = ('_values', '_options')

    def __init__(self, values: Sequence[ColumnValue],
                 options: RowOptions = DEFAULT_OPTIONS) -> None:
        """Wrap a row without copying it.

        Args:
            values: Column values in adapter order
            options: Index and numeric handling options
        """
        self._values = values
        self._options = options

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[ColumnValue]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return tuple(self._values) == tuple(other._values)

    def __hash__(self) -> int:
        return hash(tuple(self._values))

    def __repr__(self) -> str:
        return f'Row({tuple(self._values)!r})'

    @property
    def options(self) -> RowOptions:
        return self._options

    def get(self, index: int) -> Any:
        """Return the raw value at `index` without any type check.

        Raises ColumnIndexError for an index outside the row when
        `strict_index` is set, otherwise returns None for it.
        """
        if is_boolean(index):
            raise TypeError(f'Column index must be an int, got {type(index).__name__}')
        index = operator.index(index)
        if not 0 <= index < len(self._values):
            if self._options.strict_index:
                raise ColumnIndexError(index, len(self._values))
            return None
        return self._values[index]

    def _mismatch(self, index: int, expected: str, value: Any) -> TypeMismatchError:
        return TypeMismatchError(index, expected, value, kind_name(value))

    def string_nullable(self, index: int) -> str | None:
        """Get a text value or None.
        """
        value = self.get(index)
        if is_null(value):
            return None
        if not is_text(value):
            raise self._mismatch(index, 'text or null', value)
        return value

    def string(self, index: int) -> str:
        """Get a text value.
        """
        value = self.get(index)
        if not is_text(value):
            raise self._mismatch(index, 'text', value)
        return value

    def _check_number(self, index: int, value: Any, expected: str) -> Number:
        if not is_number(value):
            raise self._mismatch(index, expected, value)
        if not self._options.allow_non_finite and not is_finite(value):
            raise TypeMismatchError(index, 'finite number', value, 'non-finite number')
        return value

    def number_nullable(self, index: int) -> Number | None:
        """Get a numeric value or None.
        """
        value = self.get(index)
        if is_null(value):
            return None
        return self._check_number(index, value, 'number or null')

    def number(self, index: int) -> Number:
        """Get a numeric value. Booleans are rejected.
        """
        return self._check_number(index, self.get(index), 'number')

    def bigint_nullable(self, index: int) -> int | None:
        """Get an integer value or None, widening integral numbers.
        """
        value = self.get(index)
        if is_null(value):
            return None
        if not is_integral(value):
            raise self._mismatch(index, 'integer or null', value)
        return to_wide_integer(value)

    def bigint(self, index: int) -> int:
        """Get an integer value, widening integral numbers.

        >>> Row((42.0,)).bigint(0)
        42
        """
        value = self.get(index)
        if not is_integral(value):
            raise self._mismatch(index, 'integer', value)
        return to_wide_integer(value)

    def boolean_nullable(self, index: int) -> bool | None:
        """Get a boolean value or None. Integers are not accepted.
        """
        value = self.get(index)
        if is_null(value):
            return None
        if not is_boolean(value):
            raise self._mismatch(index, 'boolean or null', value)
        return bool(value)

    def boolean(self, index: int) -> bool:
        """Get a boolean value. Integers are not accepted.
        """
        value = self.get(index)
        if not is_boolean(value):
            raise self._mismatch(index, 'boolean', value)
        return bool(value)

    def bytes_nullable(self, index: int) -> Bytes | None:
        """Get a binary value or None. Text is not accepted.
        """
        value = self.get(index)
        if is_null(value):
            return None
        if not is_bytes(value):
            raise self._mismatch(index, 'bytes or null', value)
        return value

    def bytes(self, index: int) -> Bytes:
        """Get a binary value. Text is not accepted.
        """
        value = self.get(index)
        if not is_bytes(value):
            raise self._mismatch(index, 'bytes', value)
        return value


class Rows:
    """All rows of a query result.

    Iterating yields a new `Row` per underlying tuple, in adapter order.
    Every call to `iter()` starts over from the first row; the wrapped
    result is never consumed or copied.
    """

    __slots__ = ('_result', '_options')

    def __init__(self, result: Sequence[Sequence[ColumnValue]],
                 options: RowOptions = DEFAULT_OPTIONS) -> None:
        self._result = result
        self._options = options

    def __iter__(self) -> Iterator[Row]:
        for values in self._result:
            yield Row(values, self._options)

    def __len__(self) -> int:
        return len(self._result)

    def __bool__(self) -> bool:
        return len(self._result) > 0

    def __repr__(self) -> str:
        return f'Rows(count={len(self._result)})'

    def count(self) -> int:
        """Number of rows in the result.
        """
        return len(self._result)

    def iterate(self) -> Iterator[Row]:
        """Start a fresh iteration over the rows.
        """
        return iter(self)

    def first(self) -> Row | None:
        """Return the first row, or None for an empty result.
        """
        if len(self._result) == 0:
            return None
        return Row(self._result[0], self._options)

    def to_frame(self, columns: Sequence[str] | None = None) -> pd.DataFrame:
        """Load the raw values into a DataFrame.

        Empty results keep the supplied column names.
        """
        if len(self._result) == 0:
            return pd.DataFrame(columns=list(columns) if columns is not None else None)
        df = pd.DataFrame.from_records(list(self._result), columns=columns)
        logger.debug(f'Loaded {len(df)} rows into DataFrame')
        return df
