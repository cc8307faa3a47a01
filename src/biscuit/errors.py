"""Biscuit exception hierarchy.

Shared by the codec and the typed layer so callers catch the same types
whichever layer they use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from biscuit.schema import SchemaIssue


class BiscuitError(Exception):
    """Base for all biscuit-specific errors."""


class ConfigurationError(BiscuitError):
    """Raised when cookie options or attributes are configured wrongly.

    Also raised when an optional dependency a feature needs is missing.
    """


class CookieFormatError(BiscuitError, ValueError):
    """A cookie name or value does not fit the cookie grammar.

    Always a programmer error: the codec never catches these.
    """


class InvalidCookieName(CookieFormatError):  # noqa: N818
    """The name is not a legal cookie-name token."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid cookie name: {name!r}")


class InvalidCookieValue(CookieFormatError):  # noqa: N818
    """The value contains characters a cookie value cannot carry."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid cookie value: {value!r}")


class AsyncValidationNotSupported(BiscuitError, TypeError):  # noqa: N818
    """A schema returned an awaitable where a synchronous result was required."""

    def __init__(self, schema: object) -> None:
        self.schema = schema
        name = type(schema).__name__
        super().__init__(f"Schema validation must be synchronous ({name} returned an awaitable)")


class SchemaValidationError(BiscuitError):
    """A stored cookie value was rejected by its schema.

    ``issues`` holds the schema's structured issue list.
    """

    def __init__(self, issues: tuple[SchemaIssue, ...]) -> None:
        self.issues = issues
        super().__init__("; ".join(str(issue) for issue in issues) or "Schema validation failed")
