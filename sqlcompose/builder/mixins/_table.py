from typing import TYPE_CHECKING, Optional

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder.mixins._clause import Clause, fragment_token

if TYPE_CHECKING:
    from sqlcompose.builder.mixins._clause import Fragment
    from sqlcompose.parameters import Token

__all__ = ("TableClause", "TableClauseMixin")


class TableClause(Clause):
    """Bare table identifier, optionally followed by an alias."""

    __slots__ = ("name",)

    def __init__(self) -> None:
        self.name: "Optional[Fragment]" = None

    def set(self, name: "Fragment") -> None:
        self.name = name

    def emit(self, tokens: "list[Token]") -> None:
        if self.name is not None:
            tokens.append(fragment_token(self.name))

    def __bool__(self) -> bool:
        return self.name is not None


@trait
class TableClauseMixin:
    """Mixin providing the target table."""

    __slots__ = ()

    _table: TableClause

    def _ensure_mutable(self) -> None: ...

    def table(self, name: "Fragment") -> Self:
        """Set the table the statement operates on.

        Args:
            name: Table name, optionally followed by an alias (``"product p"``).

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._table.set(name)
        return self
