"""PostgreSQL implementation of the post-tag association repository."""

from collections import defaultdict

import logfire
from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model.common import utcnow
from scribe.domain.model.tag import Tag
from scribe.domain.repository.post_tag import PostTagRepository
from scribe.domain.value import PostId, TagId
from scribe.persistence.mappers import row_to_tag
from scribe.persistence.tables import posts_tags_table, tags_table


class PostgresPostTagRepository(PostTagRepository):
    """PostgreSQL implementation of PostTagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def replace(self, post_id: PostId, tag_ids: list[TagId]) -> None:
        """Delete every association of the post, then insert the new set."""
        with logfire.span(
            "post_tag_repository.replace", post_id=str(post_id), count=len(tag_ids)
        ):
            await self.session.execute(
                delete(posts_tags_table).where(posts_tags_table.c.post_id == post_id)
            )

            if tag_ids:
                now = utcnow()
                await self.session.execute(
                    insert(posts_tags_table),
                    [
                        {"post_id": post_id, "tag_id": tag_id, "created_at": now}
                        for tag_id in tag_ids
                    ],
                )

            await self.session.flush()

    async def find_tags_for_post(self, post_id: PostId) -> list[Tag]:
        """Tags of one post, ordered by name."""
        stmt = (
            select(tags_table)
            .join(posts_tags_table, posts_tags_table.c.tag_id == tags_table.c.id)
            .where(posts_tags_table.c.post_id == post_id)
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_tags_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, list[Tag]]:
        """Tags for several posts in a single query."""
        if not post_ids:
            return {}

        tags_by_post: dict[PostId, list[Tag]] = defaultdict(list)

        stmt = (
            select(posts_tags_table.c.post_id, *tags_table.c)
            .select_from(posts_tags_table)
            .join(tags_table, posts_tags_table.c.tag_id == tags_table.c.id)
            .where(posts_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            data = row._asdict()
            post_id = data.pop("post_id")
            tags_by_post[post_id].append(row_to_tag(data))

        return {post_id: tags_by_post.get(post_id, []) for post_id in post_ids}
