"""Placeholder extraction.

Regex-based scanning for positional ``?`` markers and named ``:name``
markers. A ``?`` preceded by an odd number of backslashes is escaped and is
not a marker.
"""

import re
from functools import lru_cache
from typing import Final

from sqlcompose.parameters.types import ParameterInfo, ParameterStyle

__all__ = ("ParameterValidator",)

_PARAMETER_REGEX: Final = re.compile(
    r"""
    (?P<escapes>\\*)(?P<qmark>\?) |                             # ?, possibly escaped
    (?P<named_colon>:(?P<colon_name>[a-zA-Z_][a-zA-Z0-9_-]*))   # :name
    """,
    re.VERBOSE,
)

_CACHE_SIZE: Final = 1024


@lru_cache(maxsize=_CACHE_SIZE)
def _extract(sql: str) -> "tuple[ParameterInfo, ...]":
    parameters: list[ParameterInfo] = []
    ordinal = 0

    for match in _PARAMETER_REGEX.finditer(sql):
        if match.group("qmark"):
            if len(match.group("escapes")) % 2:
                continue
            parameters.append(
                ParameterInfo(
                    name=None,
                    style=ParameterStyle.QMARK,
                    position=match.start("qmark"),
                    ordinal=ordinal,
                    placeholder_text="?",
                )
            )
        else:
            parameters.append(
                ParameterInfo(
                    name=match.group("colon_name"),
                    style=ParameterStyle.NAMED_COLON,
                    position=match.start("named_colon"),
                    ordinal=ordinal,
                    placeholder_text=match.group("named_colon"),
                )
            )
        ordinal += 1

    return tuple(parameters)


class ParameterValidator:
    """Validates and extracts SQL placeholders with detailed information."""

    __slots__ = ()

    def extract_parameters(self, sql: str) -> "list[ParameterInfo]":
        """Extract placeholder information from a SQL string.

        Args:
            sql: SQL string to analyze

        Returns:
            List of ParameterInfo objects, sorted by position
        """
        return list(_extract(sql))

    def extract_markers(self, sql: str) -> "list[ParameterInfo]":
        """Extract only the unescaped positional markers."""
        return [info for info in _extract(sql) if info.style is ParameterStyle.QMARK]
