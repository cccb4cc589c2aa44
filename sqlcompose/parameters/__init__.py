"""Placeholder extraction and binding resolution."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from sqlcompose.exceptions import ParameterError
from sqlcompose.parameters.converter import ParameterConverter, ResolvedStatement
from sqlcompose.parameters.types import ParameterInfo, ParameterStyle, Token
from sqlcompose.parameters.validator import ParameterValidator
from sqlcompose.utils.type_guards import is_iterable_parameters

if TYPE_CHECKING:
    from sqlcompose.typing import StatementParameters

__all__ = (
    "ParameterConverter",
    "ParameterInfo",
    "ParameterStyle",
    "ParameterValidator",
    "ResolvedStatement",
    "Token",
    "prepare",
    "split_parameters",
)


def split_parameters(parameters: "Optional[StatementParameters]") -> "tuple[dict[str, Any], list[Any]]":
    """Split bind parameters into keyed and positional values.

    String keys of a mapping are keyed values. Integer keys of a mapping and
    the items of a sequence are positional values, kept in the order given.

    Args:
        parameters: A mapping, a sequence, or None.

    Raises:
        ParameterError: The parameters are neither a mapping nor a sequence, or a
            mapping key is neither a string nor an integer.

    Returns:
        The keyed values and the positional values.
    """
    named: dict[str, Any] = {}
    positional: list[Any] = []
    if parameters is None:
        return named, positional
    if isinstance(parameters, Mapping):
        for key, value in parameters.items():
            if isinstance(key, str):
                named[key] = value
            elif isinstance(key, int) and not isinstance(key, bool):
                positional.append(value)
            else:
                msg = f"Bind parameter keys must be str or int, got {type(key).__name__}"
                raise ParameterError(msg)
        return named, positional
    if is_iterable_parameters(parameters):
        positional.extend(parameters)
        return named, positional
    msg = f"Bind parameters must be a mapping or a sequence, got {type(parameters).__name__}"
    raise ParameterError(msg)


def prepare(sql: str, parameters: "Optional[StatementParameters]" = None) -> "tuple[str, list[Any]]":
    """Resolve a raw SQL string into positional form.

    Named markers are rewritten to ``?`` and array values are expanded, the
    same way statement builders resolve their own text.

    Args:
        sql: SQL text with ``?`` and/or ``:name`` markers.
        parameters: The values to bind.

    Returns:
        The rewritten SQL text and the ordered values.
    """
    named, positional = split_parameters(parameters)
    sql, values, _ = ParameterConverter().convert([Token(sql)], named, positional)
    return sql, values
