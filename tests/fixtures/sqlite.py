import sqlite3

import pytest
import pytest_asyncio
import sqlalchemy as sa
from sqlalchemy.ext.asyncio import create_async_engine

CREATE_TABLE = """
CREATE TABLE test_table (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL UNIQUE,
    value INTEGER NOT NULL,
    ratio REAL,
    payload BLOB
)
"""

INSERT_DATA = """
INSERT INTO test_table (name, value, ratio, payload) VALUES
('Alice', 10, 0.5, X'0102'),
('Bob', 20, NULL, NULL),
('Charlie', 30, 1.5, X'FF')
"""


@pytest.fixture
def sqlite_conn():
    """Create an in-memory SQLite database for testing"""
    conn = sqlite3.connect(':memory:')
    conn.execute(CREATE_TABLE)
    conn.execute(INSERT_DATA)
    conn.commit()

    yield conn
    conn.close()


@pytest.fixture
def sa_conn():
    """SQLAlchemy connection to an in-memory SQLite database"""
    engine = sa.create_engine('sqlite://')
    with engine.connect() as conn:
        conn.exec_driver_sql(CREATE_TABLE)
        conn.exec_driver_sql(INSERT_DATA)
        conn.commit()
        yield conn
    engine.dispose()


@pytest_asyncio.fixture
async def async_sa_conn():
    """SQLAlchemy async connection to an in-memory SQLite database (aiosqlite)"""
    engine = create_async_engine('sqlite+aiosqlite://')
    async with engine.connect() as conn:
        await conn.exec_driver_sql(CREATE_TABLE)
        await conn.exec_driver_sql(INSERT_DATA)
        await conn.commit()
        yield conn
    await engine.dispose()
