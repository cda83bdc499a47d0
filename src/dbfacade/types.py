"""
Column value kinds and the checks used by the typed row accessors.

This module provides:
- ColumnValue: the values an adapter may hand back for one column
- Kind predicates: is_null, is_text, is_number, is_boolean, is_bytes
- Wide integer conversion: is_integral, to_wide_integer

Adapters built on NumPy or Pandas may return numpy scalars and pandas
missing-value markers; these are classified alongside the builtin types.
"""
import math
import numbers
from decimal import Decimal
from typing import Any, TypeAlias

import numpy as np
import pandas as pd

__all__ = [
    'ColumnValue',
    'Bytes',
    'is_null',
    'is_text',
    'is_number',
    'is_finite',
    'is_integral',
    'is_boolean',
    'is_bytes',
    'to_wide_integer',
    'kind_name',
]

ColumnValue: TypeAlias = (
    str | int | float | Decimal | bool | bytes | bytearray | memoryview | None
)
Bytes: TypeAlias = bytes | bytearray | memoryview

BOOLEAN_TYPES = (bool, np.bool_)
BYTES_TYPES = (bytes, bytearray, memoryview)
FLOAT_TYPES = (float, np.floating)


def is_null(value: Any) -> bool:
    """Check for an absent value.

    NaN is a number, not a null.

    >>> is_null(None), is_null(pd.NA), is_null(pd.NaT), is_null(float('nan'))
    (True, True, True, False)
    """
    return value is None or value is pd.NA or value is pd.NaT


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, BOOLEAN_TYPES)


def is_bytes(value: Any) -> bool:
    return isinstance(value, BYTES_TYPES)


def is_number(value: Any) -> bool:
    """Check for a numeric kind. Booleans are not numbers here.

    >>> is_number(1), is_number(1.5), is_number(Decimal('2')), is_number(True)
    (True, True, True, False)
    """
    if is_boolean(value):
        return False
    return isinstance(value, numbers.Real | Decimal)


def is_finite(value: Any) -> bool:
    """Check a numeric value is neither NaN nor infinite.
    """
    if isinstance(value, FLOAT_TYPES):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return True


def is_integral(value: Any) -> bool:
    """Check a numeric value represents a whole number.

    >>> is_integral(42), is_integral(42.0), is_integral(4.2), is_integral(float('inf'))
    (True, True, False, False)
    """
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if not is_finite(value):
        return False
    if isinstance(value, FLOAT_TYPES):
        return bool(value % 1 == 0)
    if isinstance(value, Decimal):
        return value == value.to_integral_value()
    if isinstance(value, numbers.Rational):
        return value.denominator == 1
    return False


def to_wide_integer(value: Any) -> int:
    """Convert an integral numeric value to a Python int without loss.

    Callers check is_integral first. A plain int is returned as is.

    >>> to_wide_integer(np.int64(7)), to_wide_integer(2.0 ** 60)
    (7, 1152921504606846976)
    """
    if type(value) is int:
        return value
    return int(value)


def kind_name(value: Any) -> str:
    """Name the kind of a column value for error messages.
    """
    if is_null(value):
        return 'null'
    if is_boolean(value):
        return 'boolean'
    if is_text(value):
        return 'text'
    if is_bytes(value):
        return 'bytes'
    if isinstance(value, numbers.Integral):
        return 'integer'
    if is_number(value):
        return 'number'
    return type(value).__name__
