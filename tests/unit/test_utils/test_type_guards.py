"""Unit tests for type guard functions."""

import pytest

from sqlcompose.builder import Delete, Raw, Select
from sqlcompose.utils.type_guards import (
    is_array_value,
    is_iterable_parameters,
    is_mapping,
    is_raw,
    is_statement,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([1, 2], True),
        ((1,), True),
        ({1, 2}, True),
        (frozenset(), True),
        ("abc", False),
        (b"abc", False),
        (bytearray(b"abc"), False),
        ({"a": 1}, False),
        (1, False),
        (None, False),
    ],
)
def test_is_array_value(value: object, expected: bool) -> None:
    assert is_array_value(value) is expected


def test_is_iterable_parameters_excludes_sets() -> None:
    assert is_iterable_parameters([1])
    assert not is_iterable_parameters({1})
    assert not is_iterable_parameters("a")


def test_statement_guards() -> None:
    select = Select()

    assert is_statement(select)
    assert is_statement(Delete())
    assert is_raw(Raw("NOW()"))
    assert not is_raw("NOW()")
    assert is_mapping({})
    assert not is_mapping([])
