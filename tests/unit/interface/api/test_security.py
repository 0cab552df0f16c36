"""Unit tests for request token extraction."""

import pytest
from fastapi import HTTPException

from stackit.config import AuthSettings
from stackit.domain.service import JWTService
from stackit.interface.api.security import get_auth_token, require_user_id


class TestGetAuthToken:
    """Tests for get_auth_token."""

    def test_bearer_header(self):
        """The token is read from a Bearer header."""
        assert get_auth_token(authorization="Bearer abc.def", auth_token=None) == "abc.def"

    def test_scheme_is_case_insensitive(self):
        """The Bearer scheme matches in any case."""
        assert get_auth_token(authorization="bearer abc", auth_token=None) == "abc"

    def test_cookie_fallback(self):
        """Without a header the cookie is used."""
        assert get_auth_token(authorization=None, auth_token="cookie-token") == "cookie-token"

    def test_header_wins_over_cookie(self):
        """The header takes precedence when both are sent."""
        token = get_auth_token(authorization="Bearer header-token", auth_token="cookie")
        assert token == "header-token"

    def test_other_scheme_ignored(self):
        """Non-Bearer authorization falls back to the cookie."""
        assert get_auth_token(authorization="Basic dXNlcg==", auth_token=None) is None


class TestRequireUserId:
    """Tests for require_user_id."""

    def test_valid_token(self):
        """A valid token yields its user ID."""
        jwt_service = JWTService(AuthSettings(jwt_secret="unit-secret"))
        token = jwt_service.create_token("user-123", "alice")

        assert require_user_id(jwt_service, token) == "user-123"

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_invalid_token(self, token):
        """Missing and invalid tokens are 401."""
        jwt_service = JWTService(AuthSettings(jwt_secret="unit-secret"))

        with pytest.raises(HTTPException) as exc_info:
            require_user_id(jwt_service, token)
        assert exc_info.value.status_code == 401
