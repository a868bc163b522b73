"""Error hierarchy for scoped_css."""
from __future__ import annotations


class ScopedCssError(Exception):
    """Base error for all scoped_css errors."""


class ParseError(ScopedCssError):
    """Raised when CSS source does not match any grammar alternative.

    ``remaining`` is the input left at the point of failure, so callers can
    show the offending fragment.
    """

    def __init__(
        self,
        message: str,
        *,
        remaining: str = "",
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.remaining = remaining
        self.line = line
        self.column = column
        super().__init__(message)


class UnknownNameError(ScopedCssError, KeyError):
    """A class or id name is not present in a stylesheet's rename table."""

    def __init__(self, name: str, *, prefix: str = "") -> None:
        self.name = name
        self.prefix = prefix
        super().__init__(
            f"CSS class or id name {name!r} does not exist in the stylesheet "
            f"scoped with prefix {prefix!r}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
