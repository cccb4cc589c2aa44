"""Clause component base class."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

from sqlcompose.parameters import Token
from sqlcompose.utils.type_guards import is_raw

if TYPE_CHECKING:
    from sqlcompose.builder._base import Raw

__all__ = ("Clause", "Fragment", "fragment_token")

Fragment = Union[str, "Raw"]
"""Caller-authored SQL text: a plain string or a :class:`Raw` fragment."""


def fragment_token(fragment: Fragment, separator: str = " ") -> Token:
    """Caller text is resolved against the bind registry; a :class:`Raw` fragment is kept verbatim."""
    if is_raw(fragment):
        return Token.raw(fragment.sql, separator)
    return Token(str(fragment), separator=separator)


class Clause(ABC):
    """A single optional fragment of a statement.

    A clause holds its own configuration and appends its tokens only when it
    has been configured.
    """

    __slots__ = ()

    @abstractmethod
    def emit(self, tokens: "list[Token]") -> None:
        """Append this clause's tokens, if any."""

    @abstractmethod
    def __bool__(self) -> bool:
        """Whether the clause has been configured."""
