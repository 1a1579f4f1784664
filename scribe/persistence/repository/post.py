"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import Post
from scribe.domain.repository.post import PostRepository
from scribe.domain.value import PostId, PostStatus, UserId
from scribe.persistence.mappers import post_to_dict, row_to_post
from scribe.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_published(self, limit: int = 200) -> List[Post]:
        """Find published posts, newest first."""
        with logfire.span("post_repository.find_published", limit=limit):
            stmt = (
                select(posts_table)
                .where(posts_table.c.status == PostStatus.PUBLISHED.value)
                .order_by(posts_table.c.created_at.desc())
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_owner(self, owner_id: UserId, limit: int = 200) -> List[Post]:
        """Find all posts of an owner, newest first."""
        with logfire.span(
            "post_repository.find_by_owner", owner_id=str(owner_id), limit=limit
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.user_id == owner_id)
                .order_by(posts_table.c.created_at.desc())
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count posts of an owner."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.user_id == owner_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)

            exists = await self.session.scalar(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )

            if exists:
                # Ownership and creation time never change
                post_dict.pop("user_id")
                post_dict.pop("created_at")
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = insert(posts_table).values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post. posts_tags rows are removed by ON DELETE CASCADE."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()
