"""Unit tests for resolving plain SQL text and splitting bind parameters."""

from typing import Any

import pytest

from sqlcompose.exceptions import ParameterError, UnresolvedParameterError
from sqlcompose.parameters import prepare, split_parameters


def test_prepare_without_parameters() -> None:
    assert prepare("SELECT 1") == ("SELECT 1", [])


def test_prepare_with_sequence() -> None:
    assert prepare("SELECT * FROM t WHERE id IN(?) AND a = ?", [[1, 2], "x"]) == (
        "SELECT * FROM t WHERE id IN(?,?) AND a = ?",
        [1, 2, "x"],
    )


def test_prepare_with_mixed_mapping() -> None:
    sql, parameters = prepare("SELECT * FROM t WHERE id IN(:ids) AND a = ?", {"ids": (1, 2), 0: "x"})

    assert sql == "SELECT * FROM t WHERE id IN(?,?) AND a = ?"
    assert parameters == [1, 2, "x"]


def test_prepare_unresolved_name() -> None:
    with pytest.raises(UnresolvedParameterError):
        prepare("SELECT * FROM t WHERE id = :id", {"other": 1})


@pytest.mark.parametrize(
    ("parameters", "named", "positional"),
    [
        pytest.param(None, {}, [], id="none"),
        pytest.param([1, 2], {}, [1, 2], id="list"),
        pytest.param((1,), {}, [1], id="tuple"),
        pytest.param({"a": 1, 0: 2, 1: 3}, {"a": 1}, [2, 3], id="mixed_mapping"),
    ],
)
def test_split_parameters(parameters: Any, named: "dict[str, Any]", positional: "list[Any]") -> None:
    assert split_parameters(parameters) == (named, positional)


@pytest.mark.parametrize("parameters", ["text", 42, {(1, 2): "a"}, {True: "a"}], ids=["str", "int", "tuple_key", "bool_key"])
def test_split_parameters_rejects_invalid_input(parameters: Any) -> None:
    with pytest.raises(ParameterError):
        split_parameters(parameters)
