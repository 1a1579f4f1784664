"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from scribe.domain.model.profile import Profile
from scribe.domain.value import ProfileId, UserId


class ProfileRepository(ABC):
    """Repository for Profile entities."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile belonging to a user."""
        pass

    @abstractmethod
    async def upsert(
        self, profile_id: ProfileId, user_id: UserId, name: Optional[str]
    ) -> Profile:
        """Insert a profile or update the existing one for ``user_id``.

        ``profile_id`` is only used when a new row is inserted. On conflict
        the stored name is replaced only when ``name`` is not None.

        Args:
            profile_id: ID for a newly inserted profile
            user_id: Owner of the profile
            name: Display name, None to keep the current value

        Returns:
            The stored profile
        """
        pass
