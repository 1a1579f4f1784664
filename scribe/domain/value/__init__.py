"""Domain value objects for Scribe."""

from scribe.domain.value.identifiers import PostId, ProfileId, TagId, UserId
from scribe.domain.value.types import PostStatus, Slug, TagName, slugify

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "TagId",
    "ProfileId",
    # Types
    "PostStatus",
    "TagName",
    "Slug",
    "slugify",
]
