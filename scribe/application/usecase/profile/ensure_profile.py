"""Ensure profile use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import ProfileService
from scribe.domain.value import UserId

from .item import ProfileItem


class EnsureProfileRequest(BaseModel):
    """Ensure profile request."""

    user_id: str  # Current user ID
    name: str | None = None  # Used only if no profile exists yet


class EnsureProfileUseCase:
    """Use case run after sign-in to create the profile on first login.

    Existing profiles are returned untouched.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize ensure profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: EnsureProfileRequest) -> ProfileItem | None:
        """Return the caller's profile, creating it when a name is supplied.

        Returns:
            The profile, or None if none exists and no name was given
        """
        with logfire.span("ensure_profile.execute", user_id=request.user_id):
            profile = await self.profile_service.ensure_profile(
                UserId(UUID(request.user_id)), request.name
            )
            return ProfileItem.from_profile(profile) if profile else None
