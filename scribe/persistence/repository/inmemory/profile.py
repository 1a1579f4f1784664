"""In-memory implementation of Profile repository for testing."""

from typing import Optional

from scribe.domain.model.common import utcnow
from scribe.domain.model.profile import Profile
from scribe.domain.repository.profile import ProfileRepository
from scribe.domain.value import ProfileId, UserId

from .database import InMemoryDatabase


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        """Initialize repository over a shared store."""
        self.db = db

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        return self.db.profiles.get(user_id)

    async def upsert(
        self, profile_id: ProfileId, user_id: UserId, name: Optional[str]
    ) -> Profile:
        now = utcnow()
        existing = self.db.profiles.get(user_id)
        if existing:
            changes: dict = {"updated_at": now}
            if name is not None:
                changes["name"] = name
            profile = existing.model_copy(update=changes)
        else:
            profile = Profile(
                id=profile_id, user_id=user_id, name=name, created_at=now, updated_at=now
            )
        self.db.profiles[user_id] = profile
        return profile
