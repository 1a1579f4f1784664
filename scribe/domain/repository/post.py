"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from scribe.domain.model.post import Post
from scribe.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID regardless of status.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_published(self, limit: int = 200) -> List[Post]:
        """Find published posts, newest first.

        Args:
            limit: Maximum number of posts to return

        Returns:
            Published posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId, limit: int = 200) -> List[Post]:
        """Find every post owned by a user, in any status, newest first.

        Args:
            owner_id: The owner's user ID
            limit: Maximum number of posts to return

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count posts owned by a user, in any status."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Hard delete a post. Its tag associations go with it.

        Args:
            post_id: The post ID to delete
        """
        pass
