from typing import Optional

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder.mixins._clause import Clause
from sqlcompose.exceptions import SQLBuilderError
from sqlcompose.parameters import Token

__all__ = ("LimitClause", "LimitClauseMixin", "OffsetClause", "OffsetClauseMixin")


def _row_count(value: int, clause: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{clause} must be an integer, got {type(value).__name__}."
        raise SQLBuilderError(msg)
    if value < 0:
        msg = f"{clause} must not be negative, got {value}."
        raise SQLBuilderError(msg)
    return value


class LimitClause(Clause):
    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value: Optional[int] = None

    def set(self, value: int) -> None:
        self.value = _row_count(value, "LIMIT")

    def emit(self, tokens: "list[Token]") -> None:
        if self.value is not None:
            tokens.append(Token.bound(f"LIMIT {self.value}"))

    def __bool__(self) -> bool:
        return self.value is not None


class OffsetClause(Clause):
    """Offset written as ``,<offset>`` right after the LIMIT fragment.

    The offset only exists in the ``LIMIT <count> ,<offset>`` form, so it is
    dropped when the statement has no limit.
    """

    __slots__ = ("limit", "value")

    def __init__(self, limit: LimitClause) -> None:
        self.limit = limit
        self.value: Optional[int] = None

    def set(self, value: int) -> None:
        self.value = _row_count(value, "OFFSET")

    def emit(self, tokens: "list[Token]") -> None:
        if self.value is not None and self.limit:
            tokens.append(Token.bound(f",{self.value}"))

    def __bool__(self) -> bool:
        return self.value is not None and bool(self.limit)


@trait
class LimitClauseMixin:
    """Mixin providing the LIMIT clause."""

    __slots__ = ()

    _limit: LimitClause

    def _ensure_mutable(self) -> None: ...

    def limit(self, value: int) -> Self:
        """Limit the number of rows.

        Args:
            value: The maximum number of rows.

        Raises:
            SQLBuilderError: If the value is not a non-negative integer.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._limit.set(value)
        return self


@trait
class OffsetClauseMixin:
    """Mixin providing the row offset."""

    __slots__ = ()

    _offset: OffsetClause

    def _ensure_mutable(self) -> None: ...

    def offset(self, value: int) -> Self:
        """Skip rows before the first returned row.

        Only rendered together with ``limit()``.

        Args:
            value: The number of rows to skip.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._offset.set(value)
        return self
