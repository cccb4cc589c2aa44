"""Unit tests for the statement factory."""

from sqlcompose import SQLFactory, sql
from sqlcompose.builder import Call, Delete, Insert, Raw, Replace, Select, Update


def test_factory_returns_builders() -> None:
    assert isinstance(sql.select(), Select)
    assert isinstance(sql.insert({"a": 1}), Insert)
    assert isinstance(sql.replace({"a": 1}), Replace)
    assert isinstance(sql.update({"a": 1}), Update)
    assert isinstance(sql.delete(), Delete)
    assert isinstance(sql.call("proc"), Call)
    assert sql.raw("NOW()") == Raw("NOW()")


def test_factory_returns_independent_builders(builder: SQLFactory) -> None:
    first = builder.select().table("product").where("id = ?").bind([1])
    second = builder.select().table("category")

    assert first is not second
    assert first.get_query() == "SELECT * FROM product WHERE (id = ?)"
    assert second.get_query() == "SELECT * FROM category"
    assert second.get_parameters() == []


def test_module_factory_is_a_factory() -> None:
    assert isinstance(sql, SQLFactory)
