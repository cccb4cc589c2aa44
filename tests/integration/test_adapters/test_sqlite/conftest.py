import sqlite3
from collections.abc import Generator

import pytest

from sqlcompose.adapters.sqlite import SqliteDriver


@pytest.fixture
def sqlite_connection() -> Generator[sqlite3.Connection, None, None]:
    connection = sqlite3.connect(":memory:")
    connection.execute(
        """
        CREATE TABLE product (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            price INTEGER DEFAULT 0,
            meta TEXT
        )
        """
    )
    yield connection
    connection.close()


@pytest.fixture
def sqlite_driver(sqlite_connection: sqlite3.Connection) -> SqliteDriver:
    """Create a SQLite driver over a fresh in-memory database with a product table."""
    return SqliteDriver(sqlite_connection)
