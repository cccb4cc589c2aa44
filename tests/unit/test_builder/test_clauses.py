"""Unit tests for clause components."""

import pytest

from sqlcompose.builder import Raw
from sqlcompose.builder.mixins import (
    ConditionClause,
    FlagClause,
    GroupByClause,
    JoinClause,
    LimitClause,
    OffsetClause,
    OrderByClause,
    TableClause,
)
from sqlcompose.exceptions import SQLBuilderError
from sqlcompose.parameters import Token


def test_empty_clauses_emit_nothing() -> None:
    limit = LimitClause()
    clauses = [
        TableClause(),
        ConditionClause("WHERE"),
        JoinClause(),
        GroupByClause(),
        OrderByClause(),
        limit,
        OffsetClause(limit),
        FlagClause("DISTINCT"),
    ]
    tokens: list[Token] = []

    for clause in clauses:
        clause.emit(tokens)
        assert not clause

    assert tokens == []


def test_condition_clause_wraps_predicates_and_keeps_raw_verbatim() -> None:
    clause = ConditionClause("HAVING")
    clause.add("a > :a", Raw("b IS NULL"))
    tokens: list[Token] = []

    clause.emit(tokens)

    assert tokens == [
        Token.bound("HAVING ("),
        Token("a > :a", separator=""),
        Token.raw("b IS NULL", " AND "),
        Token.bound(")", separator=""),
    ]
    assert not tokens[1].is_bound
    assert tokens[2].is_bound
    assert tokens[2].markers == ()


def test_offset_clause_requires_limit() -> None:
    limit = LimitClause()
    offset = OffsetClause(limit)
    offset.set(5)

    assert not offset
    limit.set(10)
    tokens: list[Token] = []
    limit.emit(tokens)
    offset.emit(tokens)

    assert tokens == [Token.bound("LIMIT 10"), Token.bound(",5")]


def test_join_clause_renders_joins_in_call_order() -> None:
    clause = JoinClause()
    clause.add("LEFT", "stock", "s", "s.product_id = p.id")
    clause.add("cross", Raw("calendar"))
    tokens: list[Token] = []

    clause.emit(tokens)

    assert tokens == [
        Token.bound("LEFT JOIN"),
        Token("stock"),
        Token("s"),
        Token.bound("ON"),
        Token("s.product_id = p.id"),
        Token.bound("CROSS JOIN"),
        Token.raw("calendar"),
    ]


def test_join_clause_rejects_unknown_type() -> None:
    with pytest.raises(SQLBuilderError):
        JoinClause().add("full", "stock")


def test_order_by_clause_uppercases_direction() -> None:
    clause = OrderByClause()
    clause.add("price", "desc")
    clause.add("title")
    tokens: list[Token] = []

    clause.emit(tokens)

    assert tokens == [Token.bound("ORDER BY"), Token("price"), Token.bound("DESC"), Token("title"), Token.bound("ASC")]


def test_token_repr_and_hash() -> None:
    token = Token.bound("LIMIT 1", separator=" ")

    assert token.parameters == ()
    assert "LIMIT 1" in repr(token)
    assert hash(token) == hash(Token("LIMIT 1", ()))
    assert Token("a") != Token.bound("a")
    assert Token.raw("a") != Token.bound("a")
