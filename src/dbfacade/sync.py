"""
Synchronous database facade.

`SyncDatabase` forwards every call straight to a caller-supplied adapter
and wraps query results in `Row` / `Rows`:

- query(statement, params) - all rows as `Rows`
- query_one(statement, params) - first row or None
- query_one_or_raise(statement, params) - first row, NoRowsError if none
- execute(statement, params) - adapter's execute result, unchanged

Errors raised by the adapter propagate to the caller unchanged.
"""
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from dbfacade.adapters import SyncAdapter
from dbfacade.exceptions import NoRowsError
from dbfacade.options import DEFAULT_OPTIONS, RowOptions
from dbfacade.row import Row, Rows
from dbfacade.utils import as_param_list, dumpsql

__all__ = ['SyncDatabase']

ExecuteResult = TypeVar('ExecuteResult')


class SyncDatabase(Generic[ExecuteResult]):
    """Typed access to a synchronous adapter.

    Holds no state besides the adapter and the row options; every call runs
    to completion on the caller's thread. Serializing access to an adapter
    that is not thread-safe is left to the caller.

    >>> class Adapter:
    ...     def query(self, statement, params):
    ...         return ((1, 'a'),)
    ...     def execute(self, statement, params):
    ...         return 1
    >>> db = SyncDatabase(Adapter())
    >>> db.query_one_or_raise('select id, name from t', []).string(1)
    'a'
    """

    def __init__(self, adapter: SyncAdapter[ExecuteResult],
                 options: RowOptions = DEFAULT_OPTIONS) -> None:
        self._adapter = adapter
        self._options = options

    @property
    def adapter(self) -> SyncAdapter[ExecuteResult]:
        return self._adapter

    @property
    def options(self) -> RowOptions:
        return self._options

    @dumpsql
    def query(self, statement: str, params: Sequence[Any] | None = None) -> Rows:
        """Run a query and wrap all returned rows.
        """
        result = self._adapter.query(statement, as_param_list(params))
        return Rows(result, self._options)

    @dumpsql
    def query_one(self, statement: str, params: Sequence[Any] | None = None) -> Row | None:
        """Run a query and wrap only its first row.

        Returns None when the query returns no rows; extra rows are ignored.
        """
        result = self._adapter.query(statement, as_param_list(params))
        return Rows(result, self._options).first()

    def query_one_or_raise(self, statement: str, params: Sequence[Any] | None = None) -> Row:
        """Run a query that must return a row.

        Raises NoRowsError when the query returns no rows.
        """
        row = self.query_one(statement, params)
        if row is None:
            raise NoRowsError(statement)
        return row

    @dumpsql
    def execute(self, statement: str, params: Sequence[Any] | None = None) -> ExecuteResult:
        """Run a statement and return the adapter's result unchanged.
        """
        return self._adapter.execute(statement, as_param_list(params))
