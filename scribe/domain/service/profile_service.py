"""Profile domain service."""

from uuid import uuid4

import logfire

from scribe.domain.model.profile import Profile
from scribe.domain.repository.profile import ProfileRepository
from scribe.domain.value import ProfileId, UserId

from .base import Service


class ProfileService(Service):
    """Domain service for user profiles."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_profile(self, user_id: UserId) -> Profile | None:
        with logfire.span("profile_service.get_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user_id(user_id)
            if not profile:
                logfire.info("Profile not found", user_id=str(user_id))
            return profile

    async def upsert_profile(self, user_id: UserId, name: str | None = None) -> Profile:
        """Create the user's profile or update its name.

        Args:
            user_id: Profile owner
            name: New display name, trimmed. None keeps the stored name.

        Returns:
            The stored profile
        """
        if name is not None:
            name = name.strip()

        with logfire.span(
            "profile_service.upsert_profile",
            user_id=str(user_id),
            name_provided=name is not None,
        ):
            profile = await self.profile_repository.upsert(
                ProfileId(uuid4()), user_id, name
            )
            logfire.info("Profile upserted", user_id=str(user_id), profile_id=str(profile.id))
            return profile

    async def ensure_profile(self, user_id: UserId, name: str | None = None) -> Profile | None:
        """Make sure a profile exists once there is something to put in it.

        Returns the existing profile untouched. Without one, a profile is
        created only if ``name`` is given.

        Args:
            user_id: Profile owner
            name: Display name to use when creating

        Returns:
            The profile, or None if there was none and no name was given
        """
        with logfire.span("profile_service.ensure_profile", user_id=str(user_id)):
            existing = await self.profile_repository.find_by_user_id(user_id)
            if existing:
                return existing
            if name is None or not name.strip():
                logfire.info("No profile and no name, skipping", user_id=str(user_id))
                return None
            return await self.upsert_profile(user_id, name)
