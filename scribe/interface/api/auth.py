"""Access token extraction for API routes."""

from fastapi import Cookie, Header


def access_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Read the caller's access token.

    ``Authorization: Bearer <token>`` wins over the ``auth_token`` cookie.

    Returns:
        The raw token, or None if the request carries neither
    """
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None
