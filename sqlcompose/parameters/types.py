"""Core parameter types used by the binding resolver."""

from enum import Enum
from typing import Any, Optional

__all__ = ("ParameterInfo", "ParameterStyle", "Token")


class ParameterStyle(str, Enum):
    """Placeholder styles understood by the resolver."""

    QMARK = "qmark"
    NAMED_COLON = "named_colon"

    def __str__(self) -> str:
        return self.value


class ParameterInfo:
    """Immutable placeholder information."""

    __slots__ = ("name", "ordinal", "placeholder_text", "position", "style")

    def __init__(
        self, name: Optional[str], style: ParameterStyle, position: int, ordinal: int, placeholder_text: str
    ) -> None:
        self.name = name
        self.style = style
        self.position = position
        self.ordinal = ordinal
        self.placeholder_text = placeholder_text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name and self.style == other.style and self.position == other.position

    def __hash__(self) -> int:
        return hash((self.name, self.style, self.position))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, ordinal={self.ordinal!r}, "
            f"placeholder_text={self.placeholder_text!r}, position={self.position!r}, style={self.style!r})"
        )


class Token:
    """One fragment of a statement's token sequence.

    ``parameters`` is ``None`` for caller-authored text, whose markers are
    resolved against the statement's bind registry. Text emitted by the
    builder itself carries its already-ordered values in ``parameters`` and
    is never scanned for named markers. ``markers`` holds the offsets of the
    positional markers of builder text; when it is ``None`` the text is
    scanned for them. ``separator`` is the text placed between the previous
    token and this one.
    """

    __slots__ = ("markers", "parameters", "separator", "text")

    def __init__(
        self,
        text: str,
        parameters: "Optional[tuple[Any, ...]]" = None,
        separator: str = " ",
        markers: "Optional[tuple[int, ...]]" = None,
    ) -> None:
        self.text = text
        self.parameters = parameters
        self.separator = separator
        self.markers = markers

    @classmethod
    def bound(cls, text: str, *parameters: Any, separator: str = " ") -> "Token":
        """Create a builder-authored token carrying its own values."""
        return cls(text, parameters, separator)

    @classmethod
    def raw(cls, text: str, separator: str = " ") -> "Token":
        """Create a token for verbatim text that holds no markers at all."""
        return cls(text, (), separator, ())

    @property
    def is_bound(self) -> bool:
        return self.parameters is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return False
        return (self.text, self.parameters, self.separator, self.markers) == (
            other.text,
            other.parameters,
            other.separator,
            other.markers,
        )

    def __hash__(self) -> int:
        return hash((self.text, repr(self.parameters), self.separator, self.markers))

    def __repr__(self) -> str:
        return (
            f"Token(text={self.text!r}, parameters={self.parameters!r}, "
            f"separator={self.separator!r}, markers={self.markers!r})"
        )
