from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlcompose.parameters import split_parameters

if TYPE_CHECKING:
    from sqlcompose.typing import StatementParameters

__all__ = ("BindParametersMixin",)


@trait
class BindParametersMixin:
    """Mixin providing ``bind()`` for values referenced from caller-authored text."""

    __slots__ = ()

    _named: "dict[str, Any]"
    _positional: "list[Any]"

    def _ensure_mutable(self) -> None: ...

    def bind(self, parameters: "StatementParameters") -> Self:
        """Bind values to the markers in predicates and other caller-authored text.

        String keys of a mapping fill ``:name`` markers; a later value for the
        same name replaces the earlier one. Sequence items and integer keys fill
        ``?`` markers in order and accumulate across calls. A list or tuple
        value expands into one marker per element.

        Args:
            parameters: A mapping of names to values, a sequence of values, or a
                mapping mixing both.

        Returns:
            The current builder instance for method chaining.
        """
        self._ensure_mutable()
        named, positional = split_parameters(parameters)
        self._named.update(named)
        self._positional.extend(positional)
        return self
