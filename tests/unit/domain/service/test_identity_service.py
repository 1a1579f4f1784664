"""Unit tests for IdentityService and the JWT helpers."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from scribe.config import AuthSettings
from scribe.domain.error import AuthenticationError
from scribe.domain.service import IdentityService
from scribe.util.jwt import JWTError, create_token, verify_token
from tests.conftest import make_user_id

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-that-is-long-enough")


@pytest.fixture
def identity_service() -> IdentityService:
    return IdentityService(SETTINGS)


class TestVerifyToken:
    """Tests for token verification."""

    def test_round_trip(self):
        user_id = make_user_id()
        token = create_token(str(user_id), SETTINGS, email="a@example.com")

        payload = verify_token(token, SETTINGS)

        assert payload.sub == str(user_id)
        assert payload.email == "a@example.com"
        assert payload.role == "authenticated"

    def test_wrong_secret_rejected(self):
        other = AuthSettings(jwt_secret="another-secret-that-is-long-enough")
        token = create_token(str(make_user_id()), other)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)

    def test_expired_token_rejected(self):
        token = jwt.encode(
            {
                "sub": str(make_user_id()),
                "aud": SETTINGS.jwt_audience,
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_audience_rejected(self):
        token = jwt.encode(
            {
                "sub": str(make_user_id()),
                "aud": "anon",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)


class TestCurrentUser:
    """Tests for current_user_id and require_user."""

    def test_valid_token_resolves_user(self, identity_service):
        user_id = make_user_id()
        token = identity_service.create_token(user_id)

        assert identity_service.current_user_id(token) == user_id
        assert identity_service.require_user(token) == user_id

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_bad_token_is_anonymous(self, identity_service, token):
        assert identity_service.current_user_id(token) is None

    def test_non_uuid_subject_is_anonymous(self, identity_service):
        token = create_token("not-a-uuid", SETTINGS)

        assert identity_service.current_user_id(token) is None

    def test_require_user_without_token_raises(self, identity_service):
        with pytest.raises(AuthenticationError):
            identity_service.require_user(None)
