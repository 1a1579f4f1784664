"""PostgreSQL repository implementations."""

from scribe.persistence.repository.post import PostgresPostRepository
from scribe.persistence.repository.post_tag import PostgresPostTagRepository
from scribe.persistence.repository.profile import PostgresProfileRepository
from scribe.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresTagRepository",
    "PostgresPostTagRepository",
    "PostgresProfileRepository",
]
