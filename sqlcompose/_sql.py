"""Statement factory.

Provides a single entry point for creating statement builders:

    from sqlcompose import sql

    query = sql.select(["id", "title"]).table("product").where("id = :id").bind({"id": 1})
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlcompose.builder import Call, Delete, Insert, Raw, Replace, Select, Update

if TYPE_CHECKING:
    from sqlcompose.builder._insert import InsertValues
    from sqlcompose.builder._select import SelectColumns

__all__ = ("SQLFactory",)


class SQLFactory:
    """Factory for statement builders.

    The factory holds no state: every call returns a new, independent builder.

    Example:
        ```python
        from sqlcompose import sql

        query = sql.delete().table("product").where("id > 0").order_by("id", "desc").limit(10)
        query.get_query()
        # DELETE FROM product WHERE (id > 0) ORDER BY id DESC LIMIT 10
        ```
    """

    __slots__ = ()

    def select(self, columns: "SelectColumns" = None) -> Select:
        """Create a SELECT builder.

        Args:
            columns: A sequence of column names, Raw fragments or nested Select
                statements; a single Select or column name. Defaults to ``*``.

        Returns:
            Select: A new SELECT builder.
        """
        return Select(columns)

    def insert(self, values: "InsertValues") -> Insert:
        """Create an INSERT builder.

        Args:
            values: A mapping (one row), a sequence of mappings (several rows) or
                a Select whose result is inserted.

        Returns:
            Insert: A new INSERT builder.
        """
        return Insert(values)

    def replace(self, values: "InsertValues") -> Replace:
        """Create a REPLACE builder. Accepts the same values as :meth:`insert`."""
        return Replace(values)

    def update(self, values: "Mapping[str, Any]") -> Update:
        """Create an UPDATE builder.

        Args:
            values: Mapping of column names to their new values.

        Returns:
            Update: A new UPDATE builder.
        """
        return Update(values)

    def delete(self) -> Delete:
        return Delete()

    def call(self, name: str) -> Call:
        return Call(name)

    @staticmethod
    def raw(sql: str) -> Raw:
        """Wrap a SQL fragment so it is inserted verbatim.

        Args:
            sql: The fragment.

        Returns:
            Raw: The unescaped fragment.
        """
        return Raw(sql)
