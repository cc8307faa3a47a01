"""Typed cookies: schema-validated values stored as JSON.

A ``CookieOptions`` descriptor ties a cookie name to a schema. Values are
written as JSON and, unless the descriptor says otherwise, both the name
and the JSON text are base64url-encoded so any data fits the cookie
grammar::

    from biscuit import parse_cookies
    from biscuit.typed import make_cookie_options, get_cookie, set_cookie

    Prefs = make_cookie_options("prefs", schema)

    # read
    prefs = get_cookie(parse_cookies(request.headers.get("cookie")), Prefs)

    # write
    response.headers.append("set-cookie", set_cookie(Prefs, {"theme": "dark"}))

    # delete (same as set_cookie(Prefs))
    response.headers.append("set-cookie", delete_cookie(Prefs))

Schema failures raise ``SchemaValidationError`` by default. Descriptors
built with ``lenient=True`` log a warning on the ``biscuit.typed`` logger
and treat the cookie as absent instead, which suits cookies read back from
untrusted clients.
"""

from __future__ import annotations

import enum
import inspect
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from biscuit import codec
from biscuit.encoding import decode_string, encode_string
from biscuit.errors import (
    AsyncValidationNotSupported,
    ConfigurationError,
    SchemaValidationError,
)
from biscuit.schema import Schema

if TYPE_CHECKING:
    from itsdangerous import Signer

logger = logging.getLogger("biscuit.typed")


class _Unset(enum.Enum):
    UNSET = enum.auto()

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET
"""Passed (or defaulted) as the value to ``set_cookie`` to delete the cookie."""


@dataclass(frozen=True, slots=True)
class CookieOptions:
    """Describes one typed cookie. Immutable; build once, share freely.

    ``raw_name`` / ``raw_value`` skip base64url encoding of the name / the
    JSON text. A raw value is only safe when the schema is string-shaped,
    since JSON punctuation can break the cookie-value grammar.

    ``secret_key`` signs stored values (requires ``itsdangerous``).
    """

    name: str
    schema: Schema
    attributes: str | None = None
    raw_name: bool = False
    raw_value: bool = False
    lenient: bool = False
    secret_key: str | None = None

    def __post_init__(self) -> None:
        if self.attributes and not self.attributes.startswith(";"):
            msg = f"CookieOptions.attributes must start with ';', got {self.attributes!r}"
            raise ConfigurationError(msg)
        if self.secret_key is not None and not self.secret_key:
            msg = "CookieOptions.secret_key must not be empty."
            raise ConfigurationError(msg)

    @property
    def cookie_name(self) -> str:
        """The name as it appears on the wire."""
        return self.name if self.raw_name else encode_string(self.name)


def make_cookie_options(
    name: str,
    schema: Schema,
    *,
    attributes: str | None = None,
    raw_name: bool = False,
    raw_value: bool = False,
    lenient: bool = False,
    secret_key: str | None = None,
) -> CookieOptions:
    """Make a ``CookieOptions`` for ``get_cookie``, ``set_cookie`` and ``delete_cookie``.

    The schema should describe JSON data only: ``None``, booleans, numbers,
    strings, lists and dicts with string keys.

    No cookie-grammar validation happens here; a bad raw name only fails
    when a cookie is written.
    """
    return CookieOptions(
        name=name,
        schema=schema,
        attributes=attributes,
        raw_name=raw_name,
        raw_value=raw_value,
        lenient=lenient,
        secret_key=secret_key,
    )


@lru_cache(maxsize=64)
def _signer(secret_key: str, name: str) -> Signer:
    try:
        from itsdangerous import Signer
    except ImportError:
        msg = (
            "Signed cookies require the 'itsdangerous' package. "
            "Install it with: pip install biscuit-cookies[signing]"
        )
        raise ConfigurationError(msg) from None
    return Signer(secret_key, salt=f"biscuit.cookie.{name}")


def _unsign(options: CookieOptions, secret_key: str, stored: str) -> str | None:
    signer = _signer(secret_key, options.name)
    from itsdangerous import BadSignature

    try:
        return signer.unsign(stored).decode("utf-8")
    except BadSignature:
        logger.warning("Cookie %r has a bad signature; ignoring it", options.name)
        return None


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def get_cookie(cookies: Mapping[str, str], options: CookieOptions) -> Any:
    """Read, decode and validate one cookie from a ``parse_cookies`` result.

    Returns ``None`` when the cookie is missing, empty, badly signed, or not
    decodable JSON (including NaN, Infinity and nesting too deep to parse).
    Otherwise returns the schema's output value.

    Raises ``SchemaValidationError`` when the schema rejects the value
    (unless the descriptor is lenient) and ``AsyncValidationNotSupported``
    when the schema returns an awaitable.
    """
    stored = cookies.get(options.cookie_name)
    if not stored:
        return None

    if options.secret_key is not None:
        stored = _unsign(options, options.secret_key, stored)
        if stored is None:
            return None

    try:
        text = stored if options.raw_value else decode_string(stored)
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        logger.debug("Cookie %r does not hold decodable JSON; ignoring it", options.name)
        return None

    result = options.schema.validate(data)
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise AsyncValidationNotSupported(options.schema)

    if result.issues:
        if options.lenient:
            logger.warning(
                "Cookie %r failed validation: %s",
                options.name,
                "; ".join(str(issue) for issue in result.issues),
            )
            return None
        raise SchemaValidationError(result.issues)

    return result.value


def set_cookie(options: CookieOptions, value: Any = UNSET) -> str:
    """Serialize *value* to a ``Set-Cookie`` header value.

    Leaving *value* out (or passing ``UNSET``) deletes the cookie instead;
    ``None`` is stored as JSON ``null``.

    Raises ``InvalidCookieName`` / ``InvalidCookieValue`` when a raw name or
    raw value does not fit the cookie grammar, ``TypeError`` when *value*
    is not JSON-serializable, and ``ValueError`` when it holds a float NaN
    or infinity.
    """
    if value is UNSET:
        return delete_cookie(options)

    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    stored = text if options.raw_value else encode_string(text)
    if options.secret_key is not None:
        stored = _signer(options.secret_key, options.name).sign(stored).decode("utf-8")
    return codec.set_cookie(options.cookie_name, stored, attributes=options.attributes)


def delete_cookie(options: CookieOptions) -> str:
    """Serialize a ``Set-Cookie`` header value that removes the cookie."""
    return codec.delete_cookie(options.cookie_name)
