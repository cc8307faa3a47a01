"""Cookie parsing and Set-Cookie formatting.

``parse_cookies`` reads what browsers send back in the ``Cookie`` header
(or what ``document.cookie`` shows); ``set_cookie`` and ``delete_cookie``
build the strings that go out in ``Set-Cookie``.

Nothing here encodes or decodes: names and values pass through as-is and
must already fit the cookie grammar. Use :mod:`biscuit.typed` to store
arbitrary data.

Usage::

    cookies = parse_cookies(request.headers.get("cookie"))
    theme = cookies.get("theme")

    response.headers.append("set-cookie", set_cookie("theme", "dark"))
"""

import re

from biscuit.errors import InvalidCookieName, InvalidCookieValue

DEFAULT_MAX_AGE = 31536000  # one year

DEFAULT_ATTRIBUTES = f";max-age={DEFAULT_MAX_AGE};path=/;sameSite=lax"
DELETE_ATTRIBUTES = ";max-age=0;path=/;sameSite=lax"

# RFC 2616 token: printable ASCII minus separators
_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# RFC 6265 cookie-octet, optionally wrapped in DQUOTEs
_OCTETS = r"[\x21\x23-\x2B\x2D-\x3A\x3C-\x5B\x5D-\x7E]*"
_VALUE_RE = re.compile(rf'{_OCTETS}|"{_OCTETS}"')


def parse_cookies(header: str | None) -> dict[str, str]:
    """Split a raw ``Cookie`` header into an ordered name to value mapping.

    ``None`` (no header) gives an empty dict. Pairs are split on ``"; "``
    and then on the first ``=``. A pair without ``=`` is stored under the
    empty name. The last occurrence of a duplicate name wins.

    Never raises.
    """
    cookies: dict[str, str] = {}
    if header is None:
        return cookies
    for pair in header.split("; "):
        name, sep, value = pair.partition("=")
        if sep:
            cookies[name] = value
        else:
            cookies[""] = pair
    return cookies


def _check_name(name: str) -> None:
    if not _NAME_RE.fullmatch(name):
        raise InvalidCookieName(name)


def set_cookie(name: str, value: str, *, attributes: str | None = None) -> str:
    """Serialize a cookie to a ``Set-Cookie`` header value.

    *attributes* is appended verbatim and should start with ``;``; an empty
    string means no attributes at all. Only when it is ``None`` does the
    cookie get the defaults: a year on ``/`` with ``sameSite=lax``.

    Raises ``InvalidCookieName`` or ``InvalidCookieValue`` when the name
    or value does not fit the cookie grammar.
    """
    _check_name(name)
    if not _VALUE_RE.fullmatch(value):
        raise InvalidCookieValue(value)
    return f"{name}={value}{DEFAULT_ATTRIBUTES if attributes is None else attributes}"


def delete_cookie(name: str) -> str:
    """Serialize a ``Set-Cookie`` value that expires *name* immediately."""
    _check_name(name)
    return f"{name}={DELETE_ATTRIBUTES}"

