"""DELETE statement builder."""

from sqlcompose.builder._base import BuildResult, Statement
from sqlcompose.builder.mixins import (
    BindParametersMixin,
    ConditionClause,
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

__all__ = ("Delete",)


class Delete(
    Statement,
    BindParametersMixin,
    TableClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    OrderByClauseMixin,
    LimitClauseMixin,
):
    """Builder for DELETE statements.

    Example:
        ```python
        Delete().table("product").where("id > 0").order_by("id", "desc").limit(10).get_query()
        # DELETE FROM product WHERE (id > 0) ORDER BY id DESC LIMIT 10
        ```
    """

    def __init__(self) -> None:
        super().__init__()
        self._table = TableClause()
        self._joins = JoinClause()
        self._where = ConditionClause("WHERE")
        self._order_by = OrderByClause()
        self._limit = LimitClause()

    def _build(self) -> BuildResult:
        if not self._table:
            self._raise_sql_builder_error("Delete statement requires a table.")

        self._append_bound("DELETE FROM")
        self._table.emit(self._tokens)
        self._joins.emit(self._tokens)
        self._where.emit(self._tokens)
        self._order_by.emit(self._tokens)
        self._limit.emit(self._tokens)

        return self._resolve()
