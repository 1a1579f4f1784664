"""Get profile use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import ProfileService
from scribe.domain.value import UserId

from .item import ProfileItem


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # UUID string of the profile owner


class GetProfileUseCase:
    """Use case for reading a user's profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileItem | None:
        """Return the profile, or None if the user never created one."""
        with logfire.span("get_profile.execute", user_id=request.user_id):
            profile = await self.profile_service.get_profile(UserId(UUID(request.user_id)))
            return ProfileItem.from_profile(profile) if profile else None
