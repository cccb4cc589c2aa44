from typing import Any, Optional

__all__ = (
    "DriverError",
    "ExtraParameterError",
    "MissingParameterError",
    "ParameterError",
    "SQLBuilderError",
    "SQLComposeError",
    "UnresolvedParameterError",
)


class SQLComposeError(Exception):
    """Base exception class from which all sqlcompose exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLComposeError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLComposeError):
    """Issues building SQL statements (bad value shapes, missing configuration)."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class ParameterError(SQLComposeError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(ParameterError):
    """Raised when a placeholder has no value to bind."""


class UnresolvedParameterError(MissingParameterError):
    """Raised when a named placeholder is not present in the bound parameters."""

    name: str

    def __init__(self, name: str, sql: Optional[str] = None) -> None:
        super().__init__(f'Parameter "{name}" was not found in binding variables.', sql)
        self.name = name


class ExtraParameterError(ParameterError):
    """Raised when more values are bound than there are placeholders."""


class DriverError(SQLComposeError):
    """Raised by driver adapters when the database rejects a statement."""
