"""Common driver types and statement preparation."""

from typing import TYPE_CHECKING, Any, Optional, Protocol, Union, runtime_checkable

from sqlcompose.builder import BuildResult, Statement
from sqlcompose.parameters import prepare
from sqlcompose.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlcompose.typing import StatementParameters

__all__ = ("DriverProtocol", "ExecutableStatement", "prepare_statement")

logger = get_logger("driver")

ExecutableStatement = Union[Statement, BuildResult, str]


@runtime_checkable
class DriverProtocol(Protocol):
    """Executes SQL text holding only ``?`` markers with one value per marker."""

    def execute(self, sql: str, parameters: "Sequence[Any]") -> Any:
        """Execute a prepared statement."""
        ...


def prepare_statement(
    statement: ExecutableStatement, parameters: "Optional[StatementParameters]" = None
) -> "tuple[str, list[Any]]":
    """Normalize anything executable into SQL text and ordered parameters.

    Statements are built (once) and compiled results are used as they are; both
    already carry their parameters, so passing ``parameters`` with them is an
    error. Plain text is resolved through :func:`sqlcompose.parameters.prepare`.

    Args:
        statement: A statement builder, a compiled result or SQL text.
        parameters: Values for the markers of plain SQL text.

    Raises:
        TypeError: If ``statement`` is none of the accepted types, or if
            parameters are given together with a statement or compiled result.

    Returns:
        The SQL text and its ordered parameters.
    """
    if isinstance(statement, Statement):
        statement = statement.build()
    if isinstance(statement, BuildResult):
        if parameters is not None:
            msg = "Parameters cannot be passed with a compiled statement; use bind() instead."
            raise TypeError(msg)
        return statement.sql, statement.get_parameters()
    if isinstance(statement, str):
        return prepare(statement, parameters)
    msg = f"Cannot execute {type(statement).__name__!r}; expected a statement, a BuildResult or SQL text."
    raise TypeError(msg)
