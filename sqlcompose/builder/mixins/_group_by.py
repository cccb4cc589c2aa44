from typing import TYPE_CHECKING

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder.mixins._clause import Clause, fragment_token
from sqlcompose.parameters import Token

if TYPE_CHECKING:
    from sqlcompose.builder.mixins._clause import Fragment

__all__ = ("GroupByClause", "GroupByClauseMixin")


class GroupByClause(Clause):
    __slots__ = ("columns",)

    def __init__(self) -> None:
        self.columns: "list[Fragment]" = []

    def add(self, *columns: "Fragment") -> None:
        self.columns.extend(columns)

    def emit(self, tokens: "list[Token]") -> None:
        if self.columns:
            tokens.append(Token.bound("GROUP BY"))
            for index, column in enumerate(self.columns):
                tokens.append(fragment_token(column, " " if index == 0 else ", "))

    def __bool__(self) -> bool:
        return bool(self.columns)


@trait
class GroupByClauseMixin:
    """Mixin providing the GROUP BY clause."""

    __slots__ = ()

    _group_by: GroupByClause

    def _ensure_mutable(self) -> None: ...

    def group_by(self, *columns: "Fragment") -> Self:
        self._ensure_mutable()
        self._group_by.add(*columns)
        return self
