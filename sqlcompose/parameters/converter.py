"""Two-pass binding resolution.

Pass one rewrites named ``:name`` markers into positional ``?`` markers and
lays every bound value out in document order, recording where each marker
ends up in the joined text. Pass two expands array values into one marker per
element at those recorded offsets, so verbatim fragments are never scanned.
Both passes rewrite text from the last marker to the first so that earlier
offsets stay valid.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

from typing_extensions import TypeAlias

from sqlcompose.exceptions import ExtraParameterError, MissingParameterError, ParameterError, UnresolvedParameterError
from sqlcompose.parameters.types import ParameterStyle, Token
from sqlcompose.parameters.validator import ParameterValidator
from sqlcompose.utils.logging import get_logger
from sqlcompose.utils.type_guards import is_array_value, is_raw, is_statement

__all__ = ("ParameterConverter", "ResolvedStatement")

logger = get_logger("parameters")

ResolvedStatement: TypeAlias = "tuple[str, list[Any], tuple[int, ...]]"
"""SQL text, its ordered values and the offset of every positional marker."""


def _splice(sql: str, position: int, replacement: str, length: int = 1) -> str:
    return sql[:position] + replacement + sql[position + length :]


def _expanded_markers(markers: "Sequence[int]", sizes: "Mapping[int, int]") -> "tuple[int, ...]":
    """Marker offsets after the markers named in ``sizes`` became ``?,?,...`` runs."""
    expanded: list[int] = []
    shift = 0
    for ordinal, position in enumerate(markers):
        size = sizes.get(ordinal, 1)
        start = position + shift
        expanded.extend(start + 2 * index for index in range(size))
        shift += 2 * (size - 1)
    return tuple(expanded)


class ParameterConverter:
    """Resolves a token sequence and a bind registry into SQL text and values."""

    __slots__ = ("validator",)

    def __init__(self) -> None:
        self.validator = ParameterValidator()

    def resolve_named(
        self, tokens: "Iterable[Token]", named: "Mapping[str, Any]", positional: "Sequence[Any]"
    ) -> ResolvedStatement:
        """Replace named markers with ``?`` and order all values by marker position.

        Caller-authored tokens are scanned for markers: a named marker takes its
        value from ``named``, a ``?`` takes the next value from ``positional``.
        Builder-authored tokens contribute their own values unchanged, and
        verbatim tokens contribute neither values nor markers.

        Args:
            tokens: The statement's token sequence.
            named: Keyed bind values.
            positional: Positional bind values, consumed in marker order.

        Raises:
            UnresolvedParameterError: A named marker has no bound value.
            MissingParameterError: There are more ``?`` markers than positional values.
            ExtraParameterError: Positional values are left over.

        Returns:
            The joined SQL text, the ordered values and the marker offsets.
        """
        parts: list[str] = []
        values: list[Any] = []
        markers: list[int] = []
        length = 0
        cursor = 0

        for token in tokens:
            if parts:
                parts.append(token.separator)
                length += len(token.separator)
            if token.parameters is not None:
                markers.extend(length + position for position in self._token_markers(token))
                values.extend(token.parameters)
                parts.append(token.text)
                length += len(token.text)
                continue

            text = token.text
            replacements: list[tuple[int, str, int]] = []
            shift = 0
            for info in self.validator.extract_parameters(text):
                if info.style is ParameterStyle.NAMED_COLON:
                    if info.name not in named:
                        raise UnresolvedParameterError(info.name or "", text)
                    value = named[info.name]  # type: ignore[index]
                else:
                    if cursor >= len(positional):
                        msg = "Number of markers in query string does not match number of bind variables"
                        raise MissingParameterError(msg, text)
                    value = positional[cursor]
                    cursor += 1

                replacement, offsets = self._bind_value(value, values)
                start = length + info.position + shift
                markers.extend(start + offset for offset in offsets)
                shift += len(replacement) - len(info.placeholder_text)
                if replacement != info.placeholder_text:
                    replacements.append((info.position, replacement, len(info.placeholder_text)))

            for position, replacement, span in reversed(replacements):
                text = _splice(text, position, replacement, span)
            parts.append(text)
            length += len(text)

        sql = "".join(parts)
        if cursor < len(positional):
            msg = f"{len(positional) - cursor} positional bind variable(s) have no matching marker"
            raise ExtraParameterError(msg, sql)
        return sql, values, tuple(markers)

    def _token_markers(self, token: Token) -> "tuple[int, ...]":
        if token.markers is not None:
            return token.markers
        return tuple(info.position for info in self.validator.extract_markers(token.text))

    @staticmethod
    def _bind_value(value: Any, values: "list[Any]") -> "tuple[str, tuple[int, ...]]":
        """Record ``value`` for one marker.

        Raw fragments are inlined and bind nothing. Statements are inlined in
        parentheses and contribute their own parameters.

        Returns:
            The text the marker becomes and the marker offsets within that text.
        """
        if is_raw(value):
            return str(value), ()
        if is_statement(value):
            result = value.build()
            values.extend(result.parameters)
            return f"({result.sql})", tuple(position + 1 for position in result.markers)
        values.append(value)
        return "?", (0,)

    def expand_arrays(
        self, sql: str, parameters: "Sequence[Any]", markers: "Optional[Sequence[int]]" = None
    ) -> ResolvedStatement:
        """Expand every array-valued parameter into one marker per element.

        Args:
            sql: SQL text containing only positional markers.
            parameters: One value per marker, in marker order.
            markers: Offsets of the markers in ``sql``. The text is scanned for
                unescaped ``?`` when they are not given.

        Raises:
            MissingParameterError: There are more markers than values.
            ExtraParameterError: There are more values than markers.
            ParameterError: An array value is empty.

        Returns:
            The rewritten SQL text, the flattened values and the new marker offsets.
        """
        if markers is None:
            markers = [info.position for info in self.validator.extract_markers(sql)]
        if len(markers) > len(parameters):
            msg = "Number of markers in query string does not match number of bind variables"
            raise MissingParameterError(msg, sql)
        if len(markers) < len(parameters):
            msg = f"{len(parameters) - len(markers)} bind variable(s) have no matching marker"
            raise ExtraParameterError(msg, sql)

        values = list(parameters)
        sizes: dict[int, int] = {}
        for ordinal in reversed(range(len(markers))):
            value = values[ordinal]
            if not is_array_value(value):
                continue
            items = list(value)
            if not items:
                msg = f"Cannot expand an empty sequence bound to marker {ordinal + 1}"
                raise ParameterError(msg, sql)
            sql = _splice(sql, markers[ordinal], ",".join("?" * len(items)))
            values[ordinal : ordinal + 1] = items
            sizes[ordinal] = len(items)
            logger.debug("Expanded array parameter %d into %d markers", ordinal, len(items))

        return sql, values, _expanded_markers(markers, sizes)

    def convert(
        self, tokens: "Iterable[Token]", named: "Mapping[str, Any]", positional: "Sequence[Any]"
    ) -> ResolvedStatement:
        """Run both resolution passes."""
        sql, values, markers = self.resolve_named(tokens, named, positional)
        return self.expand_arrays(sql, values, markers)
