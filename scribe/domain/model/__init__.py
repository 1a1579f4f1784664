"""Domain model entities for Scribe."""

from scribe.domain.model.post import Post, PostPatch
from scribe.domain.model.profile import Profile
from scribe.domain.model.tag import PostTag, Tag

__all__ = [
    "Post",
    "PostPatch",
    "Tag",
    "PostTag",
    "Profile",
]
