"""In-memory implementation of the post-tag association repository."""

from scribe.domain.model import PostTag, Tag
from scribe.domain.model.common import utcnow
from scribe.domain.repository.post_tag import PostTagRepository
from scribe.domain.value import PostId, TagId

from .database import InMemoryDatabase


class InMemoryPostTagRepository(PostTagRepository):
    """In-memory implementation of PostTagRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        """Initialize repository over a shared store."""
        self.db = db

    async def replace(self, post_id: PostId, tag_ids: list[TagId]) -> None:
        for key in [k for k in self.db.posts_tags if k[0] == post_id]:
            del self.db.posts_tags[key]

        now = utcnow()
        for tag_id in tag_ids:
            self.db.insert_post_tag(
                PostTag(post_id=post_id, tag_id=tag_id, created_at=now)
            )

    async def find_tags_for_post(self, post_id: PostId) -> list[Tag]:
        tags = [
            self.db.tags[tag_id]
            for (pid, tag_id) in self.db.posts_tags
            if pid == post_id
        ]
        return sorted(tags, key=lambda t: t.name.root)

    async def find_tags_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, list[Tag]]:
        return {post_id: await self.find_tags_for_post(post_id) for post_id in post_ids}
