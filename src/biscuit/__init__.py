"""Biscuit: cookie parsing, Set-Cookie formatting, and typed cookies.

Raw cookies::

    from biscuit import parse_cookies, set_cookie, delete_cookie

    cookies = parse_cookies(request.headers.get("cookie"))
    header = set_cookie("theme", "dark")  # theme=dark;max-age=31536000;path=/;sameSite=lax

Typed cookies (schema-validated JSON, base64url-encoded)::

    from biscuit import typed

    Prefs = typed.make_cookie_options("prefs", schema)
    prefs = typed.get_cookie(cookies, Prefs)
    header = typed.set_cookie(Prefs, {"theme": "dark"})
"""

from biscuit import typed
from biscuit.attributes import CookieAttributes
from biscuit.codec import (
    DEFAULT_ATTRIBUTES,
    DEFAULT_MAX_AGE,
    DELETE_ATTRIBUTES,
    delete_cookie,
    parse_cookies,
    set_cookie,
)
from biscuit.errors import (
    AsyncValidationNotSupported,
    BiscuitError,
    ConfigurationError,
    CookieFormatError,
    InvalidCookieName,
    InvalidCookieValue,
    SchemaValidationError,
)
from biscuit.schema import Schema, SchemaIssue, SchemaResult, type_schema, validator_schema
from biscuit.typed import CookieOptions, make_cookie_options

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_ATTRIBUTES",
    "DEFAULT_MAX_AGE",
    "DELETE_ATTRIBUTES",
    "AsyncValidationNotSupported",
    "BiscuitError",
    "ConfigurationError",
    "CookieAttributes",
    "CookieFormatError",
    "CookieOptions",
    "InvalidCookieName",
    "InvalidCookieValue",
    "Schema",
    "SchemaIssue",
    "SchemaResult",
    "SchemaValidationError",
    "delete_cookie",
    "make_cookie_options",
    "parse_cookies",
    "set_cookie",
    "type_schema",
    "typed",
    "validator_schema",
]
