"""Tag entity for categorizing posts."""

from datetime import datetime

from pydantic import Field

from scribe.domain.model.common import DomainModel, utcnow
from scribe.domain.value import PostId, Slug, TagId, TagName


class Tag(DomainModel):
    """Tag entity for categorizing posts.

    Tags are shared by every user and are created on first use. Both the
    name and the slug derived from it are unique. Tags outlive the posts
    that reference them.
    """

    id: TagId
    name: TagName  # Unique, trimmed, original casing
    slug: Slug  # Unique, derived from name
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class PostTag(DomainModel):
    """Association between a post and one of its tags."""

    post_id: PostId
    tag_id: TagId
    created_at: datetime = Field(default_factory=utcnow)
