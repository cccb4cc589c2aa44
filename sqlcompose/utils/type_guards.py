"""Type guard functions for runtime type checking in sqlcompose.

This module provides type-safe runtime checks that help the type checker
understand type narrowing, replacing defensive hasattr() and duck typing patterns.
"""

from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from sqlcompose.builder import Raw, Statement

__all__ = (
    "is_array_value",
    "is_iterable_parameters",
    "is_mapping",
    "is_raw",
    "is_statement",
)


def is_statement(obj: Any) -> "TypeGuard[Statement]":
    from sqlcompose.builder import Statement

    return isinstance(obj, Statement)


def is_raw(obj: Any) -> "TypeGuard[Raw]":
    from sqlcompose.builder import Raw

    return isinstance(obj, Raw)


def is_mapping(obj: Any) -> "TypeGuard[Mapping[Any, Any]]":
    return isinstance(obj, Mapping)


def is_iterable_parameters(params: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if parameters are a positional sequence (but not string, bytes or mapping).

    Args:
        params: The parameters to check

    Returns:
        True if the parameters are a sequence of positional values, False otherwise
    """
    return isinstance(params, Sequence) and not isinstance(params, (str, bytes, bytearray, Mapping))


def is_array_value(value: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if a bind value must be expanded into several markers.

    Lists, tuples and sets are arrays. Strings, bytes and mappings are not.

    Args:
        value: The bind value to check

    Returns:
        True if the value is an array, False otherwise
    """
    return is_iterable_parameters(value) or isinstance(value, AbstractSet)
