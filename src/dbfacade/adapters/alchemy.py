"""
Adapters over caller-owned SQLAlchemy connections.

Statements are sent with `exec_driver_sql`, so placeholders follow the
driver's native paramstyle (`?` for sqlite3 and aiosqlite, `%s` for psycopg).
Engines and connections are created, pooled and closed by the caller.
"""
import logging
from collections.abc import Sequence
from typing import Any

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncConnection

logger = logging.getLogger(__name__)

__all__ = ['SQLAlchemyAdapter', 'AsyncSQLAlchemyAdapter']


def _driver_params(params: Sequence[Any]) -> tuple[Any, ...] | None:
    return tuple(params) if params else None


def _rows(result: sa.CursorResult) -> tuple[tuple[Any, ...], ...]:
    return tuple(tuple(row) for row in result.fetchall())


class SQLAlchemyAdapter:
    """Synchronous adapter for a SQLAlchemy `Connection`.

    `execute` returns the affected row count and, when `commit` is set,
    commits the transaction SQLAlchemy began implicitly for the statement.
    """

    def __init__(self, connection: sa.engine.Connection, commit: bool = True) -> None:
        self.connection = connection
        self.commit = commit

    def query(self, statement: str, params: Sequence[Any]) -> tuple[tuple[Any, ...], ...]:
        result = self.connection.exec_driver_sql(statement, _driver_params(params))
        return _rows(result)

    def execute(self, statement: str, params: Sequence[Any]) -> int:
        result = self.connection.exec_driver_sql(statement, _driver_params(params))
        rowcount = result.rowcount
        logger.debug(f'Executed statement with {len(params)} parameters, rowcount {rowcount}')
        if self.commit and self.connection.in_transaction():
            self.connection.commit()
        return rowcount


class AsyncSQLAlchemyAdapter:
    """Asynchronous adapter for a SQLAlchemy `AsyncConnection`.
    """

    def __init__(self, connection: AsyncConnection, commit: bool = True) -> None:
        self.connection = connection
        self.commit = commit

    async def query(self, statement: str, params: Sequence[Any]) -> tuple[tuple[Any, ...], ...]:
        result = await self.connection.exec_driver_sql(statement, _driver_params(params))
        return _rows(result)

    async def execute(self, statement: str, params: Sequence[Any]) -> int:
        result = await self.connection.exec_driver_sql(statement, _driver_params(params))
        rowcount = result.rowcount
        logger.debug(f'Executed statement with {len(params)} parameters, rowcount {rowcount}')
        if self.commit and self.connection.in_transaction():
            await self.connection.commit()
        return rowcount
