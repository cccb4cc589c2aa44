from typing import TYPE_CHECKING

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder.mixins._clause import Clause, fragment_token
from sqlcompose.parameters import Token

if TYPE_CHECKING:
    from sqlcompose.builder.mixins._clause import Fragment

__all__ = ("ConditionClause", "HavingClauseMixin", "WhereClauseMixin")


class ConditionClause(Clause):
    """Predicates joined with AND in parentheses under a leading keyword (WHERE or HAVING)."""

    __slots__ = ("conditions", "keyword")

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        self.conditions: "list[Fragment]" = []

    def add(self, *conditions: "Fragment") -> None:
        self.conditions.extend(conditions)

    def emit(self, tokens: "list[Token]") -> None:
        if not self.conditions:
            return
        tokens.append(Token.bound(f"{self.keyword} ("))
        for index, condition in enumerate(self.conditions):
            tokens.append(fragment_token(condition, "" if index == 0 else " AND "))
        tokens.append(Token.bound(")", separator=""))

    def __bool__(self) -> bool:
        return bool(self.conditions)


@trait
class WhereClauseMixin:
    """Mixin providing the WHERE clause."""

    __slots__ = ()

    _where: ConditionClause

    def _ensure_mutable(self) -> None: ...

    def where(self, *conditions: "Fragment") -> Self:
        """Add one or more predicates to the WHERE clause.

        Predicates from every call are combined with AND. They may contain
        ``?`` and ``:name`` markers resolved through ``bind()``.

        Args:
            *conditions: SQL predicates.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._where.add(*conditions)
        return self


@trait
class HavingClauseMixin:
    """Mixin providing the HAVING clause."""

    __slots__ = ()

    _having: ConditionClause

    def _ensure_mutable(self) -> None: ...

    def having(self, *conditions: "Fragment") -> Self:
        self._ensure_mutable()
        self._having.add(*conditions)
        return self
