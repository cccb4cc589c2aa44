"""Integration tests executing compiled statements on SQLite."""

import sqlite3
from decimal import Decimal

import pytest

from sqlcompose import Raw, sql
from sqlcompose.adapters.sqlite import SqliteDriver
from sqlcompose.driver import DriverProtocol, prepare_statement
from sqlcompose.exceptions import DriverError, UnresolvedParameterError


def _seed(driver: SqliteDriver) -> None:
    rows = [{"title": "apple", "price": 3}, {"title": "pear", "price": 5}, {"title": "plum", "price": 8}]
    assert driver.execute(sql.insert(rows).table("product")) == 3


def test_sqlite_driver_satisfies_protocol(sqlite_driver: SqliteDriver) -> None:
    assert isinstance(sqlite_driver, DriverProtocol)


def test_sqlite_basic_crud(sqlite_driver: SqliteDriver) -> None:
    """Test insert, select, update and delete built with the factory."""
    assert sqlite_driver.execute(sql.insert({"title": "test_name", "price": 42}).table("product")) == 1

    rows = sqlite_driver.execute(sql.select(["title", "price"]).table("product").where("title = ?").bind(["test_name"]))
    assert rows == [{"title": "test_name", "price": 42}]

    updated = sqlite_driver.execute(
        sql.update({"price": 100}).table("product").where("title = :title").bind({"title": "test_name"})
    )
    assert updated == 1

    rows = sqlite_driver.execute(sql.select(["price"]).table("product").where("title = ?").bind(["test_name"]))
    assert rows == [{"price": 100}]

    assert sqlite_driver.execute(sql.delete().table("product").where("title = ?").bind(["test_name"])) == 1
    assert sqlite_driver.execute(sql.select(["COUNT(*) AS count"]).table("product")) == [{"count": 0}]


def test_sqlite_array_expansion(sqlite_driver: SqliteDriver) -> None:
    _seed(sqlite_driver)

    query = sql.select(["title"]).table("product").where("title IN(:titles)").order_by("price").bind(
        {"titles": ["plum", "apple"]}
    )

    assert sqlite_driver.execute(query) == [{"title": "apple"}, {"title": "plum"}]


def test_sqlite_nested_select_and_limit(sqlite_driver: SqliteDriver) -> None:
    _seed(sqlite_driver)

    cheapest = sql.select(["MIN(price)"]).table("product").where("price > ?").bind([3]).alias("floor")
    query = sql.select(["title", cheapest]).table("product").where("price >= ?").bind([5]).order_by("price").limit(1)

    assert sqlite_driver.execute(query) == [{"title": "pear", "floor": 5}]


def test_sqlite_union_all(sqlite_driver: SqliteDriver) -> None:
    _seed(sqlite_driver)

    query = (
        sql.select(["title"])
        .table("product")
        .where("price < ?")
        .bind([4])
        .union("all")
        .select(["title"])
        .table("product")
        .where("price > ?")
        .bind([6])
    )

    assert sorted(row["title"] for row in sqlite_driver.execute(query)) == ["apple", "plum"]


def test_sqlite_insert_from_select_and_raw(sqlite_driver: SqliteDriver) -> None:
    _seed(sqlite_driver)

    copied = sqlite_driver.execute(
        sql.insert(sql.select(["title", "price * 2"]).table("product").where("price > ?").bind([4]))
        .columns(["title", "price"])
        .table("product")
    )
    assert copied == 2

    sqlite_driver.execute(sql.insert({"title": Raw("UPPER('kiwi')"), "price": 1}).table("product"))
    assert sqlite_driver.execute(sql.select(["title"]).table("product").where("price = ?").bind([1])) == [
        {"title": "KIWI"}
    ]


def test_sqlite_execute_text_with_named_parameters(sqlite_driver: SqliteDriver) -> None:
    _seed(sqlite_driver)

    rows = sqlite_driver.execute("SELECT title FROM product WHERE price IN(:prices) ORDER BY price", {"prices": [3, 8]})

    assert rows == [{"title": "apple"}, {"title": "plum"}]


def test_sqlite_execute_build_result(sqlite_driver: SqliteDriver) -> None:
    _seed(sqlite_driver)
    result = sql.select(["COUNT(*) AS count"]).table("product").where("price > ?").bind([4]).build()

    assert sqlite_driver.execute(result) == [{"count": 2}]


def test_sqlite_type_coercion(sqlite_driver: SqliteDriver) -> None:
    sqlite_driver.execute(sql.insert({"title": "meta", "price": Decimal("7"), "meta": {"tags": ["a"]}}).table("product"))

    rows = sqlite_driver.execute(sql.select(["price", "meta"]).table("product"))

    assert rows == [{"price": 7, "meta": '{"tags":["a"]}'}]


def test_sqlite_database_error_is_wrapped(sqlite_driver: SqliteDriver) -> None:
    with pytest.raises(DriverError, match="SQLite database error") as exc_info:
        sqlite_driver.execute(sql.select().table("missing_table"))

    assert isinstance(exc_info.value.__cause__, sqlite3.Error)


def test_sqlite_binding_errors_are_raised_before_execution(sqlite_driver: SqliteDriver) -> None:
    with pytest.raises(UnresolvedParameterError):
        sqlite_driver.execute("SELECT * FROM product WHERE id = :id", {"other": 1})


def test_sqlite_transactions(sqlite_connection: sqlite3.Connection) -> None:
    driver = SqliteDriver(sqlite_connection)
    sqlite_connection.isolation_level = None

    driver.begin()
    driver.execute(sql.insert({"title": "temp"}).table("product"))
    driver.rollback()

    assert driver.execute(sql.select(["COUNT(*) AS count"]).table("product")) == [{"count": 0}]


def test_prepare_statement_rejects_parameters_for_compiled_statements() -> None:
    with pytest.raises(TypeError):
        prepare_statement(sql.select().table("product"), [1])
    with pytest.raises(TypeError):
        prepare_statement(42)  # type: ignore[arg-type]


def test_sqlite_raw_fragment_with_literal_question_mark(sqlite_driver: SqliteDriver) -> None:
    _seed(sqlite_driver)
    sqlite_driver.execute(sql.insert({"title": Raw("'what?'"), "price": 9}).table("product"))

    query = sql.select(["title"]).table("product").where(Raw("title <> 'what?'"), "price IN(?)").bind([[3, 9]])

    assert sqlite_driver.execute(query) == [{"title": "apple"}]
