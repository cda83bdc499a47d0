"""
Asynchronous database facade.

`AsyncDatabase` mirrors `SyncDatabase` for adapters whose `query` and
`execute` are coroutines. Each operation awaits exactly one adapter call and
spawns no tasks of its own; NoRowsError and adapter errors are raised when
the caller awaits the operation. Cancellation and timeouts belong to the
caller, e.g. `asyncio.timeout()` around the await.

Typed accessors on the returned rows are synchronous.
"""
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from dbfacade.adapters import AsyncAdapter
from dbfacade.exceptions import NoRowsError
from dbfacade.options import DEFAULT_OPTIONS, RowOptions
from dbfacade.row import Row, Rows
from dbfacade.utils import as_param_list, dumpsql_async

__all__ = ['AsyncDatabase']

ExecuteResult = TypeVar('ExecuteResult')


class AsyncDatabase(Generic[ExecuteResult]):
    """Typed access to an asynchronous adapter.
    """

    def __init__(self, adapter: AsyncAdapter[ExecuteResult],
                 options: RowOptions = DEFAULT_OPTIONS) -> None:
        self._adapter = adapter
        self._options = options

    @property
    def adapter(self) -> AsyncAdapter[ExecuteResult]:
        return self._adapter

    @property
    def options(self) -> RowOptions:
        return self._options

    @dumpsql_async
    async def query(self, statement: str, params: Sequence[Any] | None = None) -> Rows:
        """Run a query and wrap all returned rows.
        """
        result = await self._adapter.query(statement, as_param_list(params))
        return Rows(result, self._options)

    @dumpsql_async
    async def query_one(self, statement: str, params: Sequence[Any] | None = None) -> Row | None:
        """Run a query and wrap only its first row, or return None.
        """
        result = await self._adapter.query(statement, as_param_list(params))
        return Rows(result, self._options).first()

    async def query_one_or_raise(self, statement: str, params: Sequence[Any] | None = None) -> Row:
        """Run a query that must return a row.

        Raises NoRowsError when the query returns no rows.
        """
        row = await self.query_one(statement, params)
        if row is None:
            raise NoRowsError(statement)
        return row

    @dumpsql_async
    async def execute(self, statement: str, params: Sequence[Any] | None = None) -> ExecuteResult:
        """Run a statement and return the adapter's result unchanged.
        """
        return await self._adapter.execute(statement, as_param_list(params))
