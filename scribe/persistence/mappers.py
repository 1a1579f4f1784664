"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from scribe.domain.model import Post, Profile, Tag
from scribe.domain.value import (
    PostId,
    PostStatus,
    ProfileId,
    Slug,
    TagId,
    TagName,
    UserId,
)


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    owner = _uuid(row.get("user_id"))
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        body=row.get("body"),
        owner_id=UserId(owner) if owner else None,
        status=PostStatus(row["status"]),
        featured_image=row.get("featured_image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    The domain's ``owner_id`` is stored in the ``user_id`` column.
    """
    return {
        "id": post.id,
        "title": post.title,
        "body": post.body,
        "user_id": post.owner_id,
        "status": post.status.value,
        "featured_image": post.featured_image,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        slug=Slug(row["slug"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {
        "id": tag.id,
        "name": tag.name.root,
        "slug": tag.slug.root,
        "created_at": tag.created_at,
        "updated_at": tag.updated_at,
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        name=row.get("name"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
