"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from scribe.domain.model.tag import Tag
from scribe.domain.value import Slug, TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag aggregate."""

    @abstractmethod
    async def insert(self, tag: Tag) -> Tag:
        """Insert a new tag.

        The insert is isolated so that a unique violation does not poison
        the surrounding transaction.

        Args:
            tag: Tag to insert

        Returns:
            Inserted tag

        Raises:
            sqlalchemy.exc.IntegrityError: If the name or slug is taken
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by exact name."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Tag]:
        """Find tag by slug."""
        pass

    @abstractmethod
    async def search(self, term: str, limit: int = 100) -> list[Tag]:
        """Find tags whose name contains ``term``, ignoring case.

        Args:
            term: Substring to look for; wildcard characters match literally
            limit: Maximum number of tags to return

        Returns:
            Matching tags ordered by name
        """
        pass

    @abstractmethod
    async def find_all(self, limit: Optional[int] = None) -> list[Tag]:
        """Find all tags ordered by name.

        Args:
            limit: Maximum number of tags to return, None for no cap

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: TagId) -> bool:
        """Delete a tag and, by cascade, its post associations.

        Args:
            tag_id: Tag identifier

        Returns:
            True if a row was deleted
        """
        pass
