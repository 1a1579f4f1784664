"""JWT token utilities for identity provider access tokens."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from scribe.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims we read from an access token."""

    sub: str  # User ID assigned by the identity provider
    exp: datetime
    email: str | None = None
    role: str | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, settings: AuthSettings, email: str | None = None
) -> str:
    """Create an access token shaped like the identity provider's.

    Production tokens are minted by the provider; this is for tests and
    local development.

    Args:
        user_id: User ID (becomes the ``sub`` claim)
        settings: Authentication settings
        email: Optional email claim

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expiry_minutes)

    payload = {
        "sub": user_id,
        "aud": settings.jwt_audience,
        "role": "authenticated",
        "exp": expiry,
    }
    if email:
        payload["email"] = email

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
