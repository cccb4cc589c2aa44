"""SQLite adapter for sqlcompose."""

from sqlcompose.adapters.sqlite.driver import SqliteCursor, SqliteDriver

__all__ = ("SqliteCursor", "SqliteDriver")
