"""CALL statement builder for stored procedures."""

from collections.abc import Sequence
from typing import Any

from typing_extensions import Self

from sqlcompose.builder._base import BuildResult, Raw, Statement
from sqlcompose.utils.type_guards import is_array_value, is_mapping, is_statement

__all__ = ("Call",)


class Call(Statement):
    """Builder for ``CALL <procedure>(...)``.

    Procedure arguments are purely positional: one ``?`` per argument, in the
    order given.
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        if not isinstance(name, str) or not name:
            self._raise_sql_builder_error(f"Procedure name should be a non-empty string, {name!r} given.")
        self.name = name
        self.arguments: list[Any] = []

    def parameters(self, parameters: "Sequence[Any]") -> Self:
        """Set the procedure arguments.

        Args:
            parameters: Scalar argument values.

        Raises:
            SQLBuilderError: For a non-sequence, or for an argument that is an
                array, a mapping, a Raw fragment or a statement.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        if is_mapping(parameters) or not isinstance(parameters, Sequence) or isinstance(parameters, (str, bytes)):
            self._raise_sql_builder_error(
                f"Call parameters should be a sequence of values, {type(parameters).__name__!r} given."
            )
        for value in parameters:
            if isinstance(value, Raw) or is_statement(value) or is_array_value(value) or is_mapping(value):
                self._raise_sql_builder_error(
                    f"Call parameters should be scalar values, {type(value).__name__!r} given."
                )
        self.arguments = list(parameters)
        return self

    def _build(self) -> BuildResult:
        markers = ", ".join("?" for _ in self.arguments)
        self._append_bound(f"CALL {self.name}({markers})", tuple(self.arguments))

        return self._resolve()
