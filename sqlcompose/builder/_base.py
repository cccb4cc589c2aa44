# ruff: noqa: SLF001
"""Statement base class and the value types it produces.

A statement collects tokens and bind values through chained configuration
calls, then resolves them once into a :class:`BuildResult`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, NoReturn, Optional

from sqlcompose.exceptions import SQLBuilderError
from sqlcompose.parameters import ParameterConverter, Token
from sqlcompose.utils.logging import get_logger

__all__ = ("BuildResult", "Raw", "Statement", "value_token")

logger = get_logger("builder")


class Raw:
    """An opaque SQL fragment inserted verbatim.

    Raw fragments are never escaped, bound or scanned for markers. The caller is
    responsible for their correctness and safety.
    """

    __slots__ = ("sql",)

    def __init__(self, sql: str) -> None:
        self.sql = sql

    def __str__(self) -> str:
        return self.sql

    def __repr__(self) -> str:
        return f"Raw({self.sql!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raw):
            return False
        return self.sql == other.sql

    def __hash__(self) -> int:
        return hash(("Raw", self.sql))


@dataclass(frozen=True)
class BuildResult:
    """A compiled statement: SQL text with positional markers and its ordered parameters.

    ``markers`` holds the offset of every positional marker in ``sql``. A ``?``
    that came from a :class:`Raw` fragment is text, not a marker, and has no entry.
    """

    sql: str
    parameters: "tuple[Any, ...]" = field(default_factory=tuple)
    markers: "tuple[int, ...]" = field(default_factory=tuple)

    def get_query(self) -> str:
        return self.sql

    def get_parameters(self) -> "list[Any]":
        """Return a new list holding the ordered parameters."""
        return list(self.parameters)

    def __str__(self) -> str:
        return self.sql


class Statement(ABC):
    """Abstract base class for statement builders.

    Subclasses define ``_build()``, which appends tokens in the statement's
    fixed clause order and resolves them. ``build()`` runs it at most once;
    afterwards the statement is frozen and every configuration call raises
    :class:`SQLBuilderError`.
    """

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._named: dict[str, Any] = {}
        self._positional: list[Any] = []
        self._result: Optional[BuildResult] = None

    @abstractmethod
    def _build(self) -> BuildResult:
        """Append this statement's tokens and resolve them.

        Returns:
            BuildResult: The compiled statement.
        """

    def build(self) -> BuildResult:
        """Compile the statement.

        The first call runs the clause pipeline and both resolution passes.
        Later calls return the same :class:`BuildResult` without recomputing. A
        build that raises leaves the statement as it was, so it can be completed
        and built again.

        Returns:
            BuildResult: The SQL text and its ordered parameters.
        """
        if self._result is None:
            mark = len(self._tokens)
            try:
                result = self._build()
            except Exception:
                del self._tokens[mark:]
                raise
            logger.debug(
                "Built %s statement with %d parameter(s)", type(self).__name__, len(result.parameters)
            )
            self._result = result
        return self._result

    @property
    def is_built(self) -> bool:
        return self._result is not None

    def get_query(self) -> str:
        return self.build().sql

    def get_parameters(self) -> "list[Any]":
        return self.build().get_parameters()

    def _ensure_mutable(self) -> None:
        if self._result is not None:
            self._raise_sql_builder_error(f"{type(self).__name__} statement has already been built.")

    def _append(self, text: str, separator: str = " ") -> None:
        """Append caller-authored text, resolved against the bind registry."""
        self._tokens.append(Token(text, separator=separator))

    def _append_bound(self, text: str, parameters: "tuple[Any, ...]" = (), separator: str = " ") -> None:
        """Append builder-authored text together with the values its markers take."""
        self._tokens.append(Token(text, tuple(parameters), separator))

    def _append_result(self, result: BuildResult, separator: str = " ") -> None:
        """Append a compiled statement verbatim, keeping its parameters and markers."""
        self._tokens.append(Token(result.sql, result.parameters, separator, result.markers))

    def _resolve(self) -> BuildResult:
        sql, parameters, markers = ParameterConverter().convert(self._tokens, self._named, self._positional)
        return BuildResult(sql, tuple(parameters), markers)

    @staticmethod
    def _raise_sql_builder_error(message: str, cause: Optional[BaseException] = None) -> NoReturn:
        """Helper to raise SQLBuilderError, potentially with a cause.

        Args:
            message: The error message.
            cause: The optional original exception to chain.

        Raises:
            SQLBuilderError: Always raises this exception.
        """
        raise SQLBuilderError(message) from cause

    def __str__(self) -> str:
        return self.get_query()


def value_token(value: Any, separator: str = " ") -> Token:
    """Render one builder-held value as a token.

    Raw fragments are inlined verbatim. Statements are compiled and inlined in
    parentheses with their parameters. Anything else is bound to one ``?``.
    """
    if isinstance(value, Raw):
        return Token.raw(value.sql, separator)
    if isinstance(value, Statement):
        result = value.build()
        markers = tuple(position + 1 for position in result.markers)
        return Token(f"({result.sql})", result.parameters, separator, markers)
    return Token.bound("?", value, separator=separator)
