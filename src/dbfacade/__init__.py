"""
Type-safe access to rows returned by a caller-supplied database adapter.

The package never talks to a database itself. An adapter (any object with
`query(statement, params)` and `execute(statement, params)`) does the work;
the facades wrap its results:

- SyncDatabase(adapter): query / query_one / query_one_or_raise / execute
- AsyncDatabase(adapter): the same operations as coroutines
- Row: typed accessors (string, number, bigint, boolean, bytes and their
  `_nullable` forms) over one result row
- Rows: the counted, re-iterable collection of rows of one result
"""
__version__ = '0.1.0'

from dbfacade.adapters import AsyncAdapter, AsyncSQLAlchemyAdapter
from dbfacade.adapters import SQLAlchemyAdapter, SqliteAdapter, SyncAdapter
from dbfacade.aio import AsyncDatabase
from dbfacade.exceptions import ColumnIndexError, DatabaseError, NoRowsError
from dbfacade.exceptions import OptionsError, TypeMismatchError
from dbfacade.options import RowOptions
from dbfacade.row import Row, Rows
from dbfacade.sync import SyncDatabase

__all__ = [
    'Row',
    'Rows',
    'SyncDatabase',
    'AsyncDatabase',
    'SyncAdapter',
    'AsyncAdapter',
    'SqliteAdapter',
    'SQLAlchemyAdapter',
    'AsyncSQLAlchemyAdapter',
    'RowOptions',
    'DatabaseError',
    'TypeMismatchError',
    'NoRowsError',
    'ColumnIndexError',
    'OptionsError',
]
