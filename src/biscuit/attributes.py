"""Cookie attribute configuration.

``CookieAttributes`` is a frozen dataclass that renders the ``;``-prefixed
suffix ``set_cookie`` appends after ``name=value``::

    attrs = CookieAttributes(max_age=3600, secure=True, httponly=True)
    set_cookie("token", value, attributes=str(attrs))
    # token=...;max-age=3600;path=/;secure;httpOnly;sameSite=lax
"""

import re
from dataclasses import dataclass

from biscuit.codec import DEFAULT_MAX_AGE
from biscuit.errors import ConfigurationError

_SAMESITE = frozenset({"lax", "strict", "none"})

# ";" would start a new directive; controls are never legal in a header
_UNSAFE_RE = re.compile(r"[;\x00-\x1f\x7f]")


@dataclass(frozen=True, slots=True)
class CookieAttributes:
    """Attributes for a ``Set-Cookie`` value. Immutable after creation.

    The defaults render exactly ``DEFAULT_ATTRIBUTES``. ``None`` or
    ``False`` leaves an attribute out.
    """

    max_age: int | None = DEFAULT_MAX_AGE
    path: str | None = "/"
    domain: str | None = None
    secure: bool = False
    httponly: bool = False
    samesite: str | None = "lax"

    def __post_init__(self) -> None:
        for field_name in ("path", "domain"):
            value = getattr(self, field_name)
            if value and _UNSAFE_RE.search(value):
                msg = f"{field_name} must not contain ';' or control characters, got {value!r}"
                raise ConfigurationError(msg)
        if self.samesite is None:
            return
        if self.samesite.lower() not in _SAMESITE:
            msg = f"samesite must be one of lax, strict or none, got {self.samesite!r}"
            raise ConfigurationError(msg)
        if self.samesite.lower() == "none" and not self.secure:
            msg = "samesite='none' requires secure=True"
            raise ConfigurationError(msg)

    def render(self) -> str:
        """Serialize to a ``;``-prefixed attribute string.

        With every attribute switched off this is empty, and ``set_cookie``
        then emits a bare ``name=value`` (a session cookie).
        """
        parts: list[str] = []
        if self.max_age is not None:
            parts.append(f";max-age={self.max_age}")
        if self.path:
            parts.append(f";path={self.path}")
        if self.domain:
            parts.append(f";domain={self.domain}")
        if self.secure:
            parts.append(";secure")
        if self.httponly:
            parts.append(";httpOnly")
        if self.samesite:
            parts.append(f";sameSite={self.samesite.lower()}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()
