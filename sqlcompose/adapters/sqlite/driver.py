import contextlib
import datetime
import sqlite3
from contextlib import contextmanager
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from sqlcompose._serialization import encode_json
from sqlcompose.driver import ExecutableStatement, prepare_statement
from sqlcompose.exceptions import DriverError
from sqlcompose.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Generator, Sequence

    from sqlcompose.typing import StatementParameters

__all__ = ("SqliteCursor", "SqliteDriver", "sqlite_type_coercion_map")

logger = get_logger("adapters.sqlite")

sqlite_type_coercion_map: "dict[type, Callable[[Any], Any]]" = {
    bool: int,
    datetime.datetime: lambda v: v.isoformat(),
    datetime.date: lambda v: v.isoformat(),
    Decimal: str,
    dict: encode_json,
}


class SqliteCursor:
    """Context manager for SQLite cursor management."""

    def __init__(self, connection: "sqlite3.Connection") -> None:
        self.connection = connection
        self.cursor: Optional[sqlite3.Cursor] = None

    def __enter__(self) -> "sqlite3.Cursor":
        self.cursor = self.connection.cursor()
        return self.cursor

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.cursor is not None:
            with contextlib.suppress(sqlite3.Error):
                self.cursor.close()


class SqliteDriver:
    """Reference driver executing compiled statements on a SQLite connection.

    The connection is owned by the caller; the driver never opens, commits
    or closes it on its own.
    """

    dialect = "sqlite"

    def __init__(
        self,
        connection: "sqlite3.Connection",
        type_coercion_map: "Optional[dict[type, Callable[[Any], Any]]]" = None,
    ) -> None:
        self.connection = connection
        self.type_coercion_map = sqlite_type_coercion_map if type_coercion_map is None else type_coercion_map

    def with_cursor(self) -> SqliteCursor:
        return SqliteCursor(self.connection)

    @contextmanager
    def handle_database_exceptions(self) -> "Generator[None, None, None]":
        """Wrap SQLite errors in :class:`DriverError`."""
        try:
            yield
        except sqlite3.Error as e:
            msg = f"SQLite database error: {e}"
            raise DriverError(msg) from e

    def execute(
        self, statement: ExecutableStatement, parameters: "Optional[StatementParameters]" = None
    ) -> "Union[list[dict[str, Any]], int]":
        """Execute a statement.

        Args:
            statement: A statement builder, a compiled result, or SQL text with
                ``?``/``:name`` markers.
            parameters: Values for the markers of SQL text.

        Raises:
            DriverError: SQLite rejected the statement.

        Returns:
            The rows as dictionaries for statements that produce rows, otherwise
            the number of affected rows.
        """
        sql, prepared = prepare_statement(statement, parameters)
        return self._execute_statement(sql, prepared)

    def _execute_statement(self, sql: str, parameters: "Sequence[Any]") -> "Union[list[dict[str, Any]], int]":
        logger.debug("Executing SQL: %s", sql, extra={"extra_fields": {"parameter_count": len(parameters)}})
        coerced = [self._coerce(value) for value in parameters]
        with self.handle_database_exceptions(), self.with_cursor() as cursor:
            cursor.execute(sql, coerced)
            if cursor.description is not None:
                column_names = [col[0] for col in cursor.description]
                return [dict(zip(column_names, row)) for row in cursor.fetchall()]
            return cursor.rowcount or 0

    def _coerce(self, value: Any) -> Any:
        converter = self.type_coercion_map.get(type(value))
        return value if converter is None else converter(value)

    def begin(self) -> None:
        """Begin a database transaction."""
        with self.handle_database_exceptions():
            self.connection.execute("BEGIN")

    def rollback(self) -> None:
        """Rollback the current transaction."""
        with self.handle_database_exceptions():
            self.connection.rollback()

    def commit(self) -> None:
        """Commit the current transaction."""
        with self.handle_database_exceptions():
            self.connection.commit()
