from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.builder.mixins._clause import Clause
from sqlcompose.parameters import Token

__all__ = ("DistinctMixin", "FlagClause", "IgnoreMixin")


class FlagClause(Clause):
    """A single keyword emitted when its flag is set."""

    __slots__ = ("enabled", "keyword")

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        self.enabled = False

    def emit(self, tokens: "list[Token]") -> None:
        if self.enabled:
            tokens.append(Token.bound(self.keyword))

    def __bool__(self) -> bool:
        return self.enabled


@trait
class DistinctMixin:
    """Mixin providing SELECT DISTINCT."""

    __slots__ = ()

    _distinct: FlagClause

    def _ensure_mutable(self) -> None: ...

    def distinct(self) -> Self:
        self._ensure_mutable()
        self._distinct.enabled = True
        return self


@trait
class IgnoreMixin:
    """Mixin providing the IGNORE modifier."""

    __slots__ = ()

    _ignore: FlagClause

    def _ensure_mutable(self) -> None: ...

    def ignore(self, ignore_errors: bool = True) -> Self:
        """Emit ``IGNORE`` right after the statement keyword.

        Args:
            ignore_errors: Whether the modifier is set.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        self._ignore.enabled = ignore_errors
        return self
