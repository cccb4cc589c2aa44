"""SELECT statement builder."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional, Union

from typing_extensions import Self

from sqlcompose.builder._base import BuildResult, Raw, Statement
from sqlcompose.builder.mixins import (
    BindParametersMixin,
    ConditionClause,
    DistinctMixin,
    FlagClause,
    GroupByClause,
    GroupByClauseMixin,
    HavingClauseMixin,
    JoinClause,
    JoinClauseMixin,
    LimitClause,
    LimitClauseMixin,
    OffsetClause,
    OffsetClauseMixin,
    OrderByClause,
    OrderByClauseMixin,
    TableClause,
    TableClauseMixin,
    WhereClauseMixin,
)
from sqlcompose.parameters import Token

if TYPE_CHECKING:
    from sqlcompose.builder._union import UnionAdapter

__all__ = ("Select", "SelectColumn", "SelectColumns")

WILDCARD = "*"

SelectColumn = Union[str, Raw, "Select"]
SelectColumns = Union[SelectColumn, Sequence[SelectColumn], None]


class Select(
    Statement,
    BindParametersMixin,
    TableClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    GroupByClauseMixin,
    HavingClauseMixin,
    OrderByClauseMixin,
    LimitClauseMixin,
    OffsetClauseMixin,
    DistinctMixin,
):
    """Builder for SELECT statements.

    Clause order: ``SELECT [DISTINCT] <columns> [FROM <table>] <joins> WHERE
    GROUP BY HAVING ORDER BY LIMIT ,OFFSET``.

    Example:
        ```python
        query = (
            Select(["id", "title"])
            .table("product")
            .where("price > :price")
            .bind({"price": 10})
            .order_by("id", "desc")
            .limit(10)
        )
        query.get_query()
        # SELECT id, title FROM product WHERE (price > ?) ORDER BY id DESC LIMIT 10
        ```
    """

    def __init__(self, columns: SelectColumns = None) -> None:
        super().__init__()
        self.columns: list[SelectColumn] = self._normalize_columns(columns)
        self._alias: Optional[str] = None
        self._table = TableClause()
        self._joins = JoinClause()
        self._where = ConditionClause("WHERE")
        self._group_by = GroupByClause()
        self._having = ConditionClause("HAVING")
        self._order_by = OrderByClause()
        self._limit = LimitClause()
        self._offset = OffsetClause(self._limit)
        self._distinct = FlagClause("DISTINCT")

    @classmethod
    def _normalize_columns(cls, columns: SelectColumns) -> "list[SelectColumn]":
        if columns is None:
            return [WILDCARD]
        if isinstance(columns, (str, Raw, Select)):
            return [columns]
        if not isinstance(columns, Sequence):
            msg = f"Select columns should be a sequence or an instance of Select, {type(columns).__name__!r} given."
            cls._raise_sql_builder_error(msg)
        normalized: list[SelectColumn] = []
        for column in columns:
            if not isinstance(column, (str, Raw, Select)):
                msg = f"Select column should be a string, Raw or Select, {type(column).__name__!r} given."
                cls._raise_sql_builder_error(msg)
            normalized.append(column)
        return normalized or [WILDCARD]

    @property
    def is_wildcard(self) -> bool:
        """Whether the projection selects ``*``."""
        return any(isinstance(column, str) and column == WILDCARD for column in self.columns)

    def alias(self, alias: str) -> Self:
        """Wrap the compiled statement as ``(<query>) AS <alias>``.

        Used when the statement is nested in another statement's column list.

        Args:
            alias: The alias name.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._alias = alias
        return self

    def union(self, union_type: Optional[str] = None) -> "UnionAdapter":
        """Freeze this statement and start a UNION.

        Args:
            union_type: Optional modifier such as ``"all"`` or ``"distinct"``.

        Returns:
            An adapter whose ``select()`` starts the right-hand statement.
        """
        from sqlcompose.builder._union import UnionAdapter

        return UnionAdapter(self.build(), union_type)

    def _build(self) -> BuildResult:
        self._append_bound("SELECT")
        self._distinct.emit(self._tokens)
        self._emit_columns()
        if self._table:
            self._append_bound("FROM")
            self._table.emit(self._tokens)
        self._joins.emit(self._tokens)
        self._where.emit(self._tokens)
        self._group_by.emit(self._tokens)
        self._having.emit(self._tokens)
        self._order_by.emit(self._tokens)
        self._limit.emit(self._tokens)
        self._offset.emit(self._tokens)

        result = self._resolve()
        if self._alias is None:
            return result
        markers = tuple(position + 1 for position in result.markers)
        return BuildResult(f"({result.sql}) AS {self._alias}", result.parameters, markers)

    def _emit_columns(self) -> None:
        for index, column in enumerate(self.columns):
            separator = " " if index == 0 else ", "
            if isinstance(column, Select):
                self._append_result(column.build(), separator)
            elif isinstance(column, Raw):
                self._tokens.append(Token.raw(column.sql, separator))
            else:
                self._append(column, separator)
