"""Profile entity holding user-facing details for an identity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from scribe.domain.model.common import DomainModel, utcnow
from scribe.domain.value import ProfileId, UserId


class Profile(DomainModel):
    """Public profile of a user.

    At most one per user, created lazily the first time the user supplies
    a display name.
    """

    id: ProfileId
    user_id: UserId
    name: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
