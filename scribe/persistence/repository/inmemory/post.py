"""In-memory implementation of Post repository for testing."""

from typing import List, Optional

from scribe.domain.model import Post
from scribe.domain.repository.post import PostRepository
from scribe.domain.value import PostId, PostStatus, UserId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        """Initialize repository over a shared store."""
        self.db = db

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self.db.posts.get(post_id)

    async def find_published(self, limit: int = 200) -> List[Post]:
        posts = [p for p in self.db.posts.values() if p.status == PostStatus.PUBLISHED]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[:limit]

    async def find_by_owner(self, owner_id: UserId, limit: int = 200) -> List[Post]:
        posts = [p for p in self.db.posts.values() if p.owner_id == owner_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[:limit]

    async def count_by_owner(self, owner_id: UserId) -> int:
        return sum(1 for p in self.db.posts.values() if p.owner_id == owner_id)

    async def save(self, post: Post) -> Post:
        existing = self.db.posts.get(post.id)
        if existing:
            # Ownership and creation time never change
            post = post.model_copy(
                update={"owner_id": existing.owner_id, "created_at": existing.created_at}
            )
        self.db.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        self.db.delete_post(post_id)
