"""
Unit tests for redirect target validation.

A target is accepted only if it is a non-empty string that starts with a
single '/' and contains no ':'. Anything else falls back to the default.
"""

import pytest
from app.utils.safe_redirect import (
    DEFAULT_REDIRECT_URL,
    get_safe_redirect_url,
    is_valid_redirect_url,
)


class TestIsValidRedirectUrl:
    """Tests for is_valid_redirect_url."""

    @pytest.mark.parametrize("url", ["/dashboard", "/editor/123", "/", "/a/b?c=d#e"])
    def test_internal_paths_are_valid(self, url):
        assert is_valid_redirect_url(url) is True

    @pytest.mark.parametrize("url", ["dashboard", "evil.com", " /dash", "\\evil.com"])
    def test_must_start_with_slash(self, url):
        assert is_valid_redirect_url(url) is False

    @pytest.mark.parametrize("url", ["//evil.com", "///evil.com", "//"])
    def test_protocol_relative_rejected(self, url):
        assert is_valid_redirect_url(url) is False

    @pytest.mark.parametrize("url", [
        "https://evil.com",
        "javascript:alert(1)",
        "data:text/html,<script>alert(1)</script>",
        "/redirect?to=http://evil.com",
        "/host:8080/path",
    ])
    def test_any_colon_rejected(self, url):
        assert is_valid_redirect_url(url) is False

    @pytest.mark.parametrize("value", [None, "", 42, 0, True, ["/dash"], {"url": "/dash"}, b"/dash"])
    def test_missing_or_non_string_rejected(self, value):
        assert is_valid_redirect_url(value) is False

    def test_value_with_ambiguous_truth_rejected(self):
        """Values whose truth test raises (e.g. arrays) are still just invalid."""
        class Ambiguous:
            def __bool__(self):
                raise ValueError("truth value is ambiguous")

        assert is_valid_redirect_url(Ambiguous()) is False
        assert get_safe_redirect_url(Ambiguous(), "/x") == "/x"

    def test_no_normalization(self):
        """Whitespace is not stripped before checking."""
        assert is_valid_redirect_url("  /dash") is False
        assert is_valid_redirect_url("/dash ") is True


class TestGetSafeRedirectUrl:
    """Tests for get_safe_redirect_url."""

    def test_valid_target_returned_unchanged(self):
        assert get_safe_redirect_url("/editor/123", "/dash") == "/editor/123"

    def test_absolute_url_falls_back(self):
        assert get_safe_redirect_url("https://evil.com", "/dash") == "/dash"

    def test_protocol_relative_falls_back(self):
        assert get_safe_redirect_url("//evil.com", "/dash") == "/dash"

    def test_none_falls_back(self):
        assert get_safe_redirect_url(None, "/dash") == "/dash"

    def test_javascript_url_uses_given_default(self):
        assert get_safe_redirect_url("javascript:alert(1)", "/x") == "/x"

    def test_default_is_dash(self):
        assert DEFAULT_REDIRECT_URL == "/dash"
        assert get_safe_redirect_url("https://evil.com") == "/dash"
        assert get_safe_redirect_url(42) == "/dash"
