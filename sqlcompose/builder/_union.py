# ruff: noqa: SLF001
"""UNION support: a frozen left-hand SELECT waiting for its right-hand side."""

from typing import Optional

from sqlcompose.builder._base import BuildResult
from sqlcompose.builder._select import Select, SelectColumns

__all__ = ("UnionAdapter",)


class UnionAdapter:
    """Joins a compiled SELECT to the next one with ``UNION [<TYPE>]``.

    Example:
        ```python
        query = Select().table("product").union("all").select().table("archive")
        query.get_query()
        # SELECT * FROM product UNION ALL SELECT * FROM archive
        ```
    """

    __slots__ = ("result", "union_type")

    def __init__(self, result: BuildResult, union_type: Optional[str] = None) -> None:
        self.result = result
        self.union_type = union_type.upper() if union_type else None

    def select(self, columns: SelectColumns = None) -> Select:
        """Start the right-hand SELECT.

        The new statement begins with the frozen query and its parameters.

        Args:
            columns: Columns of the right-hand SELECT.

        Returns:
            A new Select statement.
        """
        select = Select(columns)
        select._append_result(self.result)
        select._append_bound("UNION")
        if self.union_type is not None:
            select._append_bound(self.union_type)
        return select
