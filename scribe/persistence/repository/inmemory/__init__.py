"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .post import InMemoryPostRepository
from .post_tag import InMemoryPostTagRepository
from .profile import InMemoryProfileRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryPostRepository",
    "InMemoryPostTagRepository",
    "InMemoryProfileRepository",
    "InMemoryTagRepository",
]
