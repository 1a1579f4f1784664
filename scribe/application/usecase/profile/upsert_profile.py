"""Upsert profile use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.domain.service import ProfileService
from scribe.domain.value import UserId

from .item import ProfileItem


class UpsertProfileRequest(BaseModel):
    """Upsert profile request."""

    user_id: str  # Current user ID
    name: str | None = None  # None keeps the stored name


class UpsertProfileUseCase:
    """Use case for creating or updating the caller's own profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize upsert profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpsertProfileRequest) -> ProfileItem:
        with logfire.span("upsert_profile.execute", user_id=request.user_id):
            profile = await self.profile_service.upsert_profile(
                UserId(UUID(request.user_id)), request.name
            )
            return ProfileItem.from_profile(profile)
