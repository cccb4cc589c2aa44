from typing import TYPE_CHECKING, Final, Optional

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder.mixins._clause import Clause, fragment_token
from sqlcompose.exceptions import SQLBuilderError
from sqlcompose.parameters import Token

if TYPE_CHECKING:
    from sqlcompose.builder.mixins._clause import Fragment

__all__ = ("JOIN_TYPES", "Join", "JoinClause", "JoinClauseMixin")

JOIN_TYPES: Final = ("left", "right", "inner", "cross")


class Join:
    __slots__ = ("alias", "condition", "join_type", "table")

    def __init__(
        self, join_type: str, table: "Fragment", alias: "Optional[Fragment]", condition: "Optional[Fragment]"
    ) -> None:
        self.join_type = join_type
        self.table = table
        self.alias = alias
        self.condition = condition

    def emit(self, tokens: "list[Token]") -> None:
        tokens.append(Token.bound(f"{self.join_type.upper()} JOIN"))
        tokens.append(fragment_token(self.table))
        if self.alias is not None:
            tokens.append(fragment_token(self.alias))
        if self.condition is not None:
            tokens.append(Token.bound("ON"))
            tokens.append(fragment_token(self.condition))


class JoinClause(Clause):
    """Joins in call order, each ``<TYPE> JOIN <table> [<alias>] [ON <condition>]``."""

    __slots__ = ("joins",)

    def __init__(self) -> None:
        self.joins: list[Join] = []

    def add(
        self,
        join_type: str,
        table: "Fragment",
        alias: "Optional[Fragment]" = None,
        condition: "Optional[Fragment]" = None,
    ) -> None:
        normalized = join_type.lower()
        if normalized not in JOIN_TYPES:
            msg = f"Unsupported join type: {join_type}. Expected one of {', '.join(JOIN_TYPES)}."
            raise SQLBuilderError(msg)
        self.joins.append(Join(normalized, table, alias, condition))

    def emit(self, tokens: "list[Token]") -> None:
        for join in self.joins:
            join.emit(tokens)

    def __bool__(self) -> bool:
        return bool(self.joins)


@trait
class JoinClauseMixin:
    """Mixin providing JOIN clause methods."""

    __slots__ = ()

    _joins: JoinClause

    def _ensure_mutable(self) -> None: ...

    def join(
        self,
        join_type: str,
        table: "Fragment",
        alias: "Optional[Fragment]" = None,
        on: "Optional[Fragment]" = None,
    ) -> Self:
        """Add a join.

        Args:
            join_type: One of ``left``, ``right``, ``inner`` or ``cross`` (any case).
            table: The joined table.
            alias: Optional alias for the joined table.
            on: Optional join condition.

        Raises:
            SQLBuilderError: If the join type is not supported.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._joins.add(join_type, table, alias, on)
        return self

    def left_join(self, table: "Fragment", alias: "Optional[Fragment]" = None, on: "Optional[Fragment]" = None) -> Self:
        return self.join("left", table, alias, on)

    def right_join(
        self, table: "Fragment", alias: "Optional[Fragment]" = None, on: "Optional[Fragment]" = None
    ) -> Self:
        return self.join("right", table, alias, on)

    def inner_join(
        self, table: "Fragment", alias: "Optional[Fragment]" = None, on: "Optional[Fragment]" = None
    ) -> Self:
        return self.join("inner", table, alias, on)

    def cross_join(self, table: "Fragment", alias: "Optional[Fragment]" = None) -> Self:
        return self.join("cross", table, alias)
