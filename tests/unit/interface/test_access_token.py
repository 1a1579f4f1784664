"""Unit tests for access token extraction."""

from scribe.interface.api.auth import access_token


class TestAccessToken:
    """Tests for access_token."""

    def test_bearer_header(self):
        assert access_token(authorization="Bearer abc", auth_token=None) == "abc"

    def test_scheme_is_case_insensitive(self):
        assert access_token(authorization="bearer abc", auth_token=None) == "abc"

    def test_header_wins_over_cookie(self):
        assert access_token(authorization="Bearer abc", auth_token="xyz") == "abc"

    def test_cookie_fallback(self):
        assert access_token(authorization=None, auth_token="xyz") == "xyz"

    def test_non_bearer_header_falls_back_to_cookie(self):
        assert access_token(authorization="Basic Zm9vOmJhcg==", auth_token="xyz") == "xyz"

    def test_nothing(self):
        assert access_token(authorization=None, auth_token=None) is None
        assert access_token(authorization="Bearer ", auth_token="") is None
