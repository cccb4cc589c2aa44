"""INSERT and REPLACE statement builders.

Both statements share :class:`InsertCore`, which owns the column list, the
value source and the ``ON DUPLICATE KEY UPDATE`` clause. They differ only in
their leading keyword.
"""

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Optional, Union

from typing_extensions import Self

from sqlcompose.builder._base import BuildResult, Statement, value_token
from sqlcompose.builder._select import Select
from sqlcompose.builder.mixins import BindParametersMixin, FlagClause, IgnoreMixin, TableClause, TableClauseMixin
from sqlcompose.exceptions import SQLBuilderError
from sqlcompose.parameters import Token

__all__ = ("Insert", "InsertCore", "InsertValues", "Replace")

InsertValues = Union["Mapping[str, Any]", "Sequence[Mapping[str, Any]]", Select]
DuplicateColumns = Union["Mapping[Union[int, str], Any]", "Sequence[str]", None]


def _check_row(row: Any) -> "Mapping[str, Any]":
    if not isinstance(row, Mapping):
        msg = f"Insert rows should be mappings of column names to values, {type(row).__name__!r} given."
        raise SQLBuilderError(msg)
    for key in row:
        if not isinstance(key, str):
            msg = f"Insert column names should be strings, {type(key).__name__!r} given."
            raise SQLBuilderError(msg)
    return row


class InsertCore:
    """Columns, values and duplicate-key handling shared by INSERT and REPLACE."""

    __slots__ = ("columns", "duplicate_enabled", "duplicate_values", "keyword", "rows", "source")

    def __init__(self, keyword: str, values: InsertValues) -> None:
        self.keyword = keyword
        self.columns: list[str] = []
        self.duplicate_enabled = False
        self.duplicate_values: list[tuple[Union[int, str], Any]] = []
        self.source: Optional[Select] = None
        self.rows: list[Mapping[str, Any]] = []

        if isinstance(values, Select):
            self.source = values
        elif isinstance(values, Mapping):
            self.rows = [_check_row(values)]
        elif isinstance(values, Sequence) and not isinstance(values, (str, bytes)) and values:
            self.rows = [_check_row(row) for row in values]
        else:
            msg = (
                f"{keyword.title()} values should be a mapping, a non-empty sequence of mappings or an instance "
                f"of Select, {type(values).__name__!r} given."
            )
            raise SQLBuilderError(msg)

    def set_columns(self, columns: "Sequence[str]") -> None:
        if (
            isinstance(columns, (str, bytes, Mapping))
            or not isinstance(columns, Sequence)
            or not columns
            or not all(isinstance(column, str) for column in columns)
        ):
            msg = "Columns should be a non-empty sequence of column names."
            raise SQLBuilderError(msg)
        self.columns = list(columns)

    def set_duplicate(self, columns: DuplicateColumns = None) -> None:
        self.duplicate_enabled = True
        if columns is None:
            self.duplicate_values = []
        elif isinstance(columns, Mapping):
            for key in columns:
                if isinstance(key, bool) or not isinstance(key, (int, str)):
                    msg = f"Duplicate key columns should be keyed by str or int, {type(key).__name__!r} given."
                    raise SQLBuilderError(msg)
            self.duplicate_values = list(columns.items())
        elif isinstance(columns, Sequence) and not isinstance(columns, (str, bytes)):
            self.duplicate_values = list(enumerate(columns))
        else:
            msg = f"Duplicate key columns should be a mapping or a sequence, {type(columns).__name__!r} given."
            raise SQLBuilderError(msg)

    def column_names(self) -> "list[str]":
        """The inserted columns.

        Explicit columns win. Otherwise they come from the keys of the first row,
        or from the projection of the source SELECT.

        Raises:
            SQLBuilderError: The source SELECT projects ``*`` or a nested statement.
        """
        if self.columns:
            return list(self.columns)
        if self.source is not None:
            if self.source.is_wildcard:
                msg = 'Cannot use a wildcard "*" as column name. Please define the column names manually.'
                raise SQLBuilderError(msg)
            if any(isinstance(column, Select) for column in self.source.columns):
                msg = "Cannot derive column names from a nested statement. Please define the column names manually."
                raise SQLBuilderError(msg)
            return [str(column) for column in self.source.columns]
        return list(self.rows[0])

    def emit_columns(self, tokens: "list[Token]", columns: "list[str]") -> None:
        tokens.append(Token.raw(f"({', '.join(columns)})"))

    def emit_values(self, tokens: "list[Token]", columns: "list[str]") -> None:
        if self.source is not None:
            nested = self.source.build()
            tokens.append(Token(nested.sql, nested.parameters, markers=nested.markers))
            return

        tokens.append(Token.bound("VALUES"))
        for index, row in enumerate(self.rows):
            tokens.append(Token.bound("(", separator=" " if index == 0 else ", "))
            for position, value in enumerate(self._row_values(row, columns)):
                tokens.append(value_token(value, "" if position == 0 else ", "))
            tokens.append(Token.bound(")", separator=""))

    def emit_duplicate(self, tokens: "list[Token]", columns: "list[str]") -> None:
        if not self.duplicate_enabled:
            return

        tokens.append(Token.bound("ON DUPLICATE KEY UPDATE"))
        explicit = {key for key, _ in self.duplicate_values if isinstance(key, str)}
        assigned: list[str] = []
        for key, value in self.duplicate_values:
            separator = " " if not assigned else ", "
            if isinstance(key, int):
                column = str(value)
                if column in assigned or column in explicit:
                    continue
                tokens.append(Token.bound(f"{column} = VALUES({column})", separator=separator))
            else:
                column = key
                tokens.append(Token.bound(f"{column} =", separator=separator))
                tokens.append(value_token(value))
            assigned.append(column)
        for column in columns:
            if column not in assigned:
                separator = " " if not assigned else ", "
                tokens.append(Token.bound(f"{column} = VALUES({column})", separator=separator))
                assigned.append(column)

    def _row_values(self, row: "Mapping[str, Any]", columns: "list[str]") -> "list[Any]":
        """Values of one row in column order.

        With explicit columns a row may also match by length alone, and is then
        taken in its own order. Rows of a derived column list must hold exactly
        those columns.

        Raises:
            SQLBuilderError: The row does not fit the column list.
        """
        if self.columns:
            if all(column in row for column in columns):
                return [row[column] for column in columns]
            if len(row) == len(columns):
                return list(row.values())
        elif set(row) == set(columns):
            return [row[column] for column in columns]
        msg = f"Insert row columns ({', '.join(row)}) do not match the inserted columns ({', '.join(columns)})."
        raise SQLBuilderError(msg)


class _InsertStatement(Statement, BindParametersMixin, TableClauseMixin, IgnoreMixin):
    """INSERT-like statement composed around an :class:`InsertCore`."""

    keyword: ClassVar[str]

    def __init__(self, values: InsertValues) -> None:
        super().__init__()
        self._core = InsertCore(self.keyword, values)
        self._table = TableClause()
        self._ignore = FlagClause("IGNORE")

    def columns(self, columns: "Sequence[str]") -> Self:
        """Set the inserted column names explicitly.

        Args:
            columns: A non-empty sequence of column names.

        Raises:
            SQLBuilderError: If ``columns`` is not a flat sequence of strings.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._core.set_columns(columns)
        return self

    def duplicate(self, columns: DuplicateColumns = None) -> Self:
        """Add ``ON DUPLICATE KEY UPDATE``.

        Without arguments every inserted column is updated as
        ``col = VALUES(col)``. A mapping may add string-keyed entries bound as
        ``col = ?`` (or inlined for :class:`Raw` values) and integer-keyed
        entries naming a column that takes the ``VALUES(col)`` form. Inserted
        columns not named by the mapping keep the ``VALUES(col)`` form.

        Args:
            columns: Optional mapping or sequence of column names.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._core.set_duplicate(columns)
        return self

    def _build(self) -> BuildResult:
        if not self._table:
            self._raise_sql_builder_error(f"{self.keyword.title()} statement requires a table.")
        columns = self._core.column_names()

        self._append_bound(self.keyword)
        self._ignore.emit(self._tokens)
        self._append_bound("INTO")
        self._table.emit(self._tokens)
        self._core.emit_columns(self._tokens, columns)
        self._core.emit_values(self._tokens, columns)
        self._core.emit_duplicate(self._tokens, columns)

        return self._resolve()


class Insert(_InsertStatement):
    """Builder for INSERT statements.

    Example:
        ```python
        Insert({"title": "test"}).table("product").duplicate({"id": 10}).get_query()
        # INSERT INTO product (title) VALUES (?) ON DUPLICATE KEY UPDATE id = ?, title = VALUES(title)
        ```
    """

    keyword = "INSERT"


class Replace(_InsertStatement):
    """Builder for REPLACE statements."""

    keyword = "REPLACE"
