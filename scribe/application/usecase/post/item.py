"""Post representation shared by the post use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.tag.item import TagItem
from scribe.domain.model.post import Post
from scribe.domain.model.tag import Tag
from scribe.domain.value import PostStatus, UserId


class PostItem(BaseModel):
    """Post item in responses."""

    post_id: str
    title: str
    body: str | None
    owner_id: str | None
    status: PostStatus
    featured_image: str | None
    tags: list[TagItem]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, tags: list[Tag]) -> "PostItem":
        return cls(
            post_id=str(post.id),
            title=post.title,
            body=post.body,
            owner_id=str(post.owner_id) if post.owner_id else None,
            status=post.status,
            featured_image=post.featured_image,
            tags=[TagItem.from_tag(t) for t in tags],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostListResponse(BaseModel):
    """A list of posts."""

    posts: list[PostItem]


def optional_user_id(user_id: Optional[str]) -> Optional[UserId]:
    """Parse the caller id carried by a request, None for anonymous."""
    return UserId(UUID(user_id)) if user_id else None
