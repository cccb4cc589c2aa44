"""UPDATE statement builder."""

from collections.abc import Mapping
from typing import Any

from sqlcompose.builder._base import BuildResult, Statement, value_token
from sqlcompose.builder.mixins import (
    BindParametersMixin,
    ConditionClause,
    FlagClause,
    IgnoreMixin,
    JoinClause,
    JoinClauseMixin,
    LimitClause,
    LimitClauseMixin,
    OrderByClause,
    OrderByClauseMixin,
    TableClause,
    TableClauseMixin,
    WhereClauseMixin,
)

__all__ = ("Update",)


class Update(
    Statement,
    BindParametersMixin,
    TableClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    OrderByClauseMixin,
    LimitClauseMixin,
    IgnoreMixin,
):
    """Builder for UPDATE statements.

    Each assigned value is bound as ``col = ?`` at its place in the SET list,
    so values always precede the parameters of a later WHERE predicate.

    Example:
        ```python
        Update({"title": "test"}).table("product").where("id = :id").bind({"id": 1}).get_query()
        # UPDATE product SET title = ? WHERE (id = ?)
        ```
    """

    def __init__(self, values: "Mapping[str, Any]") -> None:
        super().__init__()
        if not isinstance(values, Mapping) or not values:
            msg = f"Update values should be a non-empty mapping of column names to values, {values!r} given."
            self._raise_sql_builder_error(msg)
        for column in values:
            if not isinstance(column, str):
                self._raise_sql_builder_error(f"Update column names should be strings, {column!r} given.")
        self.values: dict[str, Any] = dict(values)
        self._table = TableClause()
        self._joins = JoinClause()
        self._where = ConditionClause("WHERE")
        self._order_by = OrderByClause()
        self._limit = LimitClause()
        self._ignore = FlagClause("IGNORE")

    def _build(self) -> BuildResult:
        if not self._table:
            self._raise_sql_builder_error("Update statement requires a table.")

        self._append_bound("UPDATE")
        self._ignore.emit(self._tokens)
        self._table.emit(self._tokens)
        self._joins.emit(self._tokens)
        self._emit_assignments()
        self._where.emit(self._tokens)
        self._order_by.emit(self._tokens)
        self._limit.emit(self._tokens)

        return self._resolve()

    def _emit_assignments(self) -> None:
        self._append_bound("SET")
        for index, (column, value) in enumerate(self.values.items()):
            self._append_bound(f"{column} =", separator=" " if index == 0 else ", ")
            self._tokens.append(value_token(value))
