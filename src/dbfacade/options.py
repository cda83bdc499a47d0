from dataclasses import dataclass, fields

from dbfacade.exceptions import OptionsError

__all__ = [
    'RowOptions',
    'DEFAULT_OPTIONS',
]


@dataclass(frozen=True)
class RowOptions:
    """Options

    Controls how row accessors treat values the column kinds leave open:

    - strict_index: Raise ColumnIndexError for an index outside the row
      (default: True). When False, out-of-range reads behave like a null value.
    - allow_non_finite: Let number accessors return NaN and infinities
      (default: True). When False, such values raise TypeMismatchError.

    >>> RowOptions(strict_index=False).allow_non_finite
    True
    """
    strict_index: bool = True
    allow_non_finite: bool = True

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, bool):
                raise OptionsError(f'{field.name} must be a bool, got {type(value).__name__}')


DEFAULT_OPTIONS = RowOptions()
