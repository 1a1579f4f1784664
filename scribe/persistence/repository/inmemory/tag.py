"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from scribe.domain.model.tag import Tag
from scribe.domain.repository.tag import TagRepository
from scribe.domain.value import Slug, TagId, TagName

from .database import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        """Initialize repository over a shared store."""
        self.db = db

    async def insert(self, tag: Tag) -> Tag:
        """Insert a tag, raising IntegrityError on a name or slug collision."""
        self.db.insert_tag(tag)
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        return self.db.tags.get(tag_id)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        return next((t for t in self.db.tags.values() if t.name == name), None)

    async def find_by_slug(self, slug: Slug) -> Optional[Tag]:
        return next((t for t in self.db.tags.values() if t.slug == slug), None)

    async def search(self, term: str, limit: int = 100) -> list[Tag]:
        needle = term.lower()
        tags = [t for t in self.db.tags.values() if needle in t.name.root.lower()]
        tags.sort(key=lambda t: t.name.root)
        return tags[:limit]

    async def find_all(self, limit: Optional[int] = None) -> list[Tag]:
        tags = sorted(self.db.tags.values(), key=lambda t: t.name.root)
        return tags if limit is None else tags[:limit]

    async def delete(self, tag_id: TagId) -> bool:
        return self.db.delete_tag(tag_id)
