"""Base64url helpers that make arbitrary text cookie-safe.

The typed layer runs names and JSON payloads through these so that any
string survives the cookie grammar. Output uses only ``[A-Za-z0-9_-]``.
"""

import base64


def encode_string(string: str) -> str:
    """UTF-8 encode, base64 encode, then strip padding and use the url-safe alphabet."""
    encoded = base64.b64encode(string.encode("utf-8")).decode("ascii")
    return encoded.replace("=", "").replace("+", "-").replace("/", "_")


def decode_string(string: str) -> str:
    """Inverse of :func:`encode_string`.

    Raises ``ValueError`` (``binascii.Error`` or ``UnicodeDecodeError``)
    when *string* was not produced by ``encode_string``.
    """
    restored = string.replace("-", "+").replace("_", "/")
    restored += "=" * (-len(restored) % 4)
    return base64.b64decode(restored, validate=True).decode("utf-8")
