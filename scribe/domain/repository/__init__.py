"""Repository interfaces for Scribe domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from scribe.domain.repository.post import PostRepository
from scribe.domain.repository.post_tag import PostTagRepository
from scribe.domain.repository.profile import ProfileRepository
from scribe.domain.repository.tag import TagRepository
from scribe.domain.repository.transaction import AfterCommit

__all__ = [
    "AfterCommit",
    "PostRepository",
    "TagRepository",
    "PostTagRepository",
    "ProfileRepository",
]
