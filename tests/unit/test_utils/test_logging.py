"""Unit tests for logging configuration."""

import io
import logging
from collections.abc import Generator

import pytest

from sqlcompose._serialization import decode_json
from sqlcompose.builder import Select
from sqlcompose.utils.logging import (
    ROOT_LOGGER_NAME,
    CorrelationIDFilter,
    StructuredFormatter,
    configure_logging,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)


@pytest.fixture
def stream_handler() -> Generator[logging.StreamHandler, None, None]:  # type: ignore[type-arg]
    """Route library logs at DEBUG into an in-memory JSON stream."""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    configure_logging(level="DEBUG", format_style="simple", extra_handlers=[handler])
    yield handler
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True
    set_correlation_id(None)


def _records(handler: logging.StreamHandler) -> "list[dict]":  # type: ignore[type-arg]
    return [decode_json(line) for line in handler.stream.getvalue().splitlines() if line]


def test_get_logger_namespaces_names() -> None:
    logger = get_logger("builder")

    assert logger.name == "sqlcompose.builder"
    assert get_logger().name == ROOT_LOGGER_NAME
    assert get_logger("sqlcompose.driver").name == "sqlcompose.driver"
    assert any(isinstance(f, CorrelationIDFilter) for f in logger.filters)


def test_get_logger_adds_filter_once() -> None:
    logger = get_logger("parameters")
    get_logger("parameters")

    assert sum(isinstance(f, CorrelationIDFilter) for f in logger.filters) == 1


def test_correlation_id_round_trip() -> None:
    set_correlation_id("abc-123")
    try:
        assert get_correlation_id() == "abc-123"
    finally:
        set_correlation_id(None)
    assert get_correlation_id() is None


def test_structured_formatter_emits_json(stream_handler: logging.StreamHandler) -> None:  # type: ignore[type-arg]
    set_correlation_id("req-1")
    get_logger("test").info("hello %s", "world", extra={"extra_fields": {"answer": 42}})

    record = _records(stream_handler)[-1]
    assert record["message"] == "hello world"
    assert record["level"] == "INFO"
    assert record["logger"] == "sqlcompose.test"
    assert record["correlation_id"] == "req-1"
    assert record["answer"] == 42


def test_build_and_array_expansion_are_logged(stream_handler: logging.StreamHandler) -> None:  # type: ignore[type-arg]
    Select().table("product").where("id IN(?)").bind([[1, 2]]).build()

    messages = [record["message"] for record in _records(stream_handler)]
    assert "Expanded array parameter 0 into 2 markers" in messages
    assert "Built Select statement with 2 parameter(s)" in messages


def test_configure_logging_replaces_handlers() -> None:
    configure_logging(level="WARNING", format_style="simple")
    configure_logging(level="WARNING", format_style="structured")
    root = logging.getLogger(ROOT_LOGGER_NAME)
    try:
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        assert root.level == logging.WARNING
        assert root.propagate is False
    finally:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        root.propagate = True
