"""Type aliases shared across sqlcompose."""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Union

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from sqlcompose.builder import Raw, Select

__all__ = ("ParameterValue", "ScalarValue", "StatementParameters")

ScalarValue: TypeAlias = Union[None, bool, int, float, str, bytes]
"""A value bound to a single ``?`` marker."""

ParameterValue: TypeAlias = Union[ScalarValue, "Sequence[Any]", "Raw", "Select"]
"""Anything accepted as a bind value.

Sequences are expanded into one marker per element, :class:`Raw` fragments are
inlined verbatim and :class:`Select` statements are compiled and inlined.
"""

StatementParameters: TypeAlias = Union["Mapping[Union[str, int], Any]", "Sequence[Any]"]
"""Parameters passed to ``bind()``: named values, positional values, or both."""
