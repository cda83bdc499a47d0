"""
Adapter over a caller-owned sqlite3 connection.
"""
import logging
import sqlite3
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)

__all__ = ['SqliteAdapter']


class SqliteAdapter:
    """Synchronous adapter for the standard library sqlite3 driver.

    The connection is supplied and closed by the caller. Parameters use
    sqlite's `?` placeholders. `execute` returns the affected row count.

    SQLite has no boolean storage class, so boolean columns come back as
    integers and must be read with `number` or `bigint`.
    """

    def __init__(self, connection: sqlite3.Connection, commit: bool = True) -> None:
        """Initialize adapter.

        Args:
            connection: Open sqlite3 connection
            commit: Commit after each `execute` that leaves a transaction open
        """
        self.connection = connection
        self.commit = commit

    def query(self, statement: str, params: Sequence[Any]) -> tuple[tuple[Any, ...], ...]:
        cursor = self.connection.execute(statement, tuple(params))
        try:
            return tuple(tuple(row) for row in cursor.fetchall())
        finally:
            cursor.close()

    def execute(self, statement: str, params: Sequence[Any]) -> int:
        cursor = self.connection.execute(statement, tuple(params))
        try:
            rowcount = cursor.rowcount
        finally:
            cursor.close()
        logger.debug(f'Executed statement with {len(params)} parameters, rowcount {rowcount}')
        if self.commit and self.connection.in_transaction:
            self.connection.commit()
        return rowcount
