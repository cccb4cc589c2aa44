from typing import TYPE_CHECKING

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder.mixins._clause import Clause, fragment_token
from sqlcompose.parameters import Token

if TYPE_CHECKING:
    from sqlcompose.builder.mixins._clause import Fragment

__all__ = ("OrderByClause", "OrderByClauseMixin")


class OrderByClause(Clause):
    """``ORDER BY <column> <DIRECTION> <column> <DIRECTION> ...`` in call order."""

    __slots__ = ("items",)

    def __init__(self) -> None:
        self.items: "list[tuple[Fragment, str]]" = []

    def add(self, column: "Fragment", direction: str = "ASC") -> None:
        self.items.append((column, direction.upper()))

    def emit(self, tokens: "list[Token]") -> None:
        if self.items:
            tokens.append(Token.bound("ORDER BY"))
            for column, direction in self.items:
                tokens.append(fragment_token(column))
                tokens.append(Token.bound(direction))

    def __bool__(self) -> bool:
        return bool(self.items)


@trait
class OrderByClauseMixin:
    """Mixin providing the ORDER BY clause."""

    __slots__ = ()

    _order_by: OrderByClause

    def _ensure_mutable(self) -> None: ...

    def order_by(self, column: "Fragment", direction: str = "ASC") -> Self:
        """Add a sort key.

        Args:
            column: Column or expression to sort by.
            direction: Sort direction, uppercased on output.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._order_by.add(column, direction)
        return self
