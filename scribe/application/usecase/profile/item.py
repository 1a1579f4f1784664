"""Profile representation shared by the profile use cases."""

from datetime import datetime

from pydantic import BaseModel

from scribe.domain.model.profile import Profile


class ProfileItem(BaseModel):
    """Profile in responses."""

    profile_id: str
    user_id: str
    name: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileItem":
        return cls(
            profile_id=str(profile.id),
            user_id=str(profile.user_id),
            name=profile.name,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
