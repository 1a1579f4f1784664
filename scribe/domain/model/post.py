"""Post aggregate root.

Posts belong to the user who created them. Only published posts are
visible to anyone else; the owner always sees and mutates their own.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from scribe.domain.model.common import DomainModel, utcnow
from scribe.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    title: str = Field(min_length=1)
    body: Optional[str] = None
    # Nullable in storage for rows that predate ownership; such posts have no owner
    owner_id: Optional[UserId] = None
    status: PostStatus = PostStatus.DRAFT
    featured_image: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED

    def is_owned_by(self, user_id: Optional[UserId]) -> bool:
        """Check ownership. Anonymous callers own nothing."""
        return user_id is not None and self.owner_id == user_id

    def is_visible_to(self, user_id: Optional[UserId]) -> bool:
        """Published posts are public; anything else is owner-only."""
        return self.is_published or self.is_owned_by(user_id)


class PostPatch(BaseModel):
    """Partial update for a post.

    Only fields explicitly set are applied, so an omitted field and a field
    sent as ``None`` mean different things. ``None`` clears ``body``,
    ``featured_image`` and ``tag_names``; it is rejected for ``title`` and
    ``status``, which cannot be empty.
    """

    title: Optional[str] = None
    body: Optional[str] = None
    status: Optional[PostStatus] = None
    featured_image: Optional[str] = None
    tag_names: Optional[list[str]] = None

    def has(self, field: str) -> bool:
        """Whether the caller supplied ``field`` at all."""
        return field in self.model_fields_set
