"""Tests for biscuit.attributes: CookieAttributes."""

import pytest

from biscuit import set_cookie
from biscuit.attributes import CookieAttributes
from biscuit.codec import DEFAULT_ATTRIBUTES
from biscuit.errors import ConfigurationError


class TestCookieAttributes:
    def test_default_matches_codec(self) -> None:
        assert CookieAttributes().render() == DEFAULT_ATTRIBUTES

    def test_str(self) -> None:
        attrs = CookieAttributes(max_age=60)
        assert str(attrs) == attrs.render() == ";max-age=60;path=/;sameSite=lax"

    def test_all_attributes(self) -> None:
        attrs = CookieAttributes(
            max_age=3600,
            path="/app",
            domain=".example.com",
            secure=True,
            httponly=True,
            samesite="Strict",
        )
        assert attrs.render() == (
            ";max-age=3600;path=/app;domain=.example.com;secure;httpOnly;sameSite=strict"
        )

    def test_session_cookie(self) -> None:
        """No max-age means the cookie ends with the browser session."""
        assert "max-age" not in CookieAttributes(max_age=None).render()

    def test_omitted_attributes(self) -> None:
        attrs = CookieAttributes(max_age=None, path=None, samesite=None)
        assert attrs.render() == ""

    def test_omitted_attributes_with_set_cookie(self) -> None:
        attrs = CookieAttributes(max_age=None, path=None, samesite=None)
        assert set_cookie("a", "1", attributes=str(attrs)) == "a=1"

    @pytest.mark.parametrize("path", ["/;domain=evil.com", "/a\r\nX-Injected: 1", "/\x00", "/\x7f"])
    def test_path_rejects_directive_injection(self, path: str) -> None:
        with pytest.raises(ConfigurationError):
            CookieAttributes(path=path)

    def test_domain_rejects_directive_injection(self) -> None:
        with pytest.raises(ConfigurationError):
            CookieAttributes(domain="example.com;secure")

    def test_plain_path_and_domain_accepted(self) -> None:
        attrs = CookieAttributes(path="/app/v1", domain=".example.com")
        assert ";path=/app/v1;domain=.example.com" in attrs.render()

    def test_samesite_none_needs_secure(self) -> None:
        with pytest.raises(ConfigurationError):
            CookieAttributes(samesite="none")
        assert CookieAttributes(samesite="None", secure=True).render().endswith(";secure;sameSite=none")

    def test_unknown_samesite(self) -> None:
        with pytest.raises(ConfigurationError):
            CookieAttributes(samesite="sometimes")

    def test_with_set_cookie(self) -> None:
        attrs = CookieAttributes(httponly=True)
        assert set_cookie("a", "1", attributes=str(attrs)) == (
            "a=1;max-age=31536000;path=/;httpOnly;sameSite=lax"
        )

    def test_frozen(self) -> None:
        attrs = CookieAttributes()
        with pytest.raises(AttributeError):
            attrs.path = "/x"  # type: ignore[misc]
