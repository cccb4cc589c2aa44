"""Unit tests for UNION composition."""

import pytest

from sqlcompose import SQLFactory
from sqlcompose.builder import Select, UnionAdapter
from sqlcompose.exceptions import SQLBuilderError


def test_union(builder: SQLFactory) -> None:
    result = builder.select().table("product").union().select().table("product").build()

    assert result.get_query() == "SELECT * FROM product UNION SELECT * FROM product"


def test_union_all(builder: SQLFactory) -> None:
    result = builder.select().table("product").union("all").select().table("product").build()

    assert result.get_query() == "SELECT * FROM product UNION ALL SELECT * FROM product"


def test_union_right_side_parameters(builder: SQLFactory) -> None:
    query = builder.select().table("product").union().select().table("product").where("id = ?").bind([1])

    assert query.get_parameters() == [1]


def test_union_keeps_left_parameters_first() -> None:
    left = Select(["id"]).table("product").where("price > :price").bind({"price": 10})
    query = left.union("distinct").select(["id"]).table("archive").where("price > :price").bind({"price": 20})

    assert query.get_query() == (
        "SELECT id FROM product WHERE (price > ?) UNION DISTINCT SELECT id FROM archive WHERE (price > ?)"
    )
    assert query.get_parameters() == [10, 20]


def test_union_freezes_left_statement() -> None:
    left = Select().table("product")
    adapter = left.union()

    assert isinstance(adapter, UnionAdapter)
    assert left.is_built
    with pytest.raises(SQLBuilderError):
        left.where("id = 1")


def test_union_chains_more_than_two_statements() -> None:
    query = Select().table("a").union().select().table("b").union("all").select().table("c")

    assert query.get_query() == "SELECT * FROM a UNION SELECT * FROM b UNION ALL SELECT * FROM c"
