"""Identity domain service.

Resolves the caller of a request from the identity provider's access token.
"""

from uuid import UUID

import logfire

from scribe.config import AuthSettings
from scribe.domain.error import AuthenticationError
from scribe.domain.value import UserId
from scribe.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class IdentityService(Service):
    """Domain service for access token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, email: str | None = None) -> str:
        """Mint an access token for a user (tests and local development).

        Args:
            user_id: User ID
            email: Optional email claim

        Returns:
            JWT token string
        """
        with logfire.span("identity_service.create_token", user_id=str(user_id)):
            return create_token(str(user_id), self.auth_settings, email=email)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an access token and extract its claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("identity_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Access token rejected", error=str(e))
                raise
            logfire.debug("Access token verified", user_id=payload.sub)
            return payload

    def current_user_id(self, token: str | None) -> UserId | None:
        """Resolve the caller, treating a missing or bad token as anonymous.

        Args:
            token: Access token (optional)

        Returns:
            User ID if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.sub))
        except JWTError:
            return None
        except ValueError:
            logfire.warn("Access token subject is not a UUID")
            return None

    def require_user(self, token: str | None) -> UserId:
        """Resolve the caller or fail.

        Raises:
            AuthenticationError: If there is no valid token
        """
        user_id = self.current_user_id(token)
        if user_id is None:
            raise AuthenticationError("Authentication required")
        return user_id
