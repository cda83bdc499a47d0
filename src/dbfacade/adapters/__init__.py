"""
Adapter protocols and reference adapters.

An adapter performs the actual query and execute calls against a driver.
The facades only require the two methods declared by `SyncAdapter` or
`AsyncAdapter`; any object with matching methods qualifies.
"""
from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from dbfacade.types import ColumnValue

ExecuteResult_co = TypeVar('ExecuteResult_co', covariant=True)

QueryResult = Sequence[Sequence[ColumnValue]]


@runtime_checkable
class SyncAdapter(Protocol[ExecuteResult_co]):
    """Synchronous adapter protocol."""

    def query(self, statement: str, params: list[Any]) -> QueryResult:
        """Run a query and return its rows as a sequence of tuples."""
        ...

    def execute(self, statement: str, params: list[Any]) -> ExecuteResult_co:
        """Run a statement and return an adapter-defined result."""
        ...


@runtime_checkable
class AsyncAdapter(Protocol[ExecuteResult_co]):
    """Asynchronous adapter protocol."""

    async def query(self, statement: str, params: list[Any]) -> QueryResult:
        """Run a query and return its rows as a sequence of tuples."""
        ...

    async def execute(self, statement: str, params: list[Any]) -> ExecuteResult_co:
        """Run a statement and return an adapter-defined result."""
        ...


from dbfacade.adapters.alchemy import AsyncSQLAlchemyAdapter, SQLAlchemyAdapter
from dbfacade.adapters.sqlite import SqliteAdapter

__all__ = [
    'SyncAdapter',
    'AsyncAdapter',
    'QueryResult',
    'SqliteAdapter',
    'SQLAlchemyAdapter',
    'AsyncSQLAlchemyAdapter',
]
