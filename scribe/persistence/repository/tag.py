"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model.tag import Tag
from scribe.domain.repository.tag import TagRepository
from scribe.domain.value import Slug, TagId, TagName
from scribe.persistence.mappers import row_to_tag, tag_to_dict
from scribe.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def insert(self, tag: Tag) -> Tag:
        """Insert a tag inside a SAVEPOINT.

        A unique violation rolls back only the savepoint, so the caller can
        keep using the request transaction to re-read the winning row.
        """
        async with self.session.begin_nested():
            await self.session.execute(insert(tags_table).values(**tag_to_dict(tag)))
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Tag]:
        """Find tag by slug."""
        stmt = select(tags_table).where(tags_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def search(self, term: str, limit: int = 100) -> list[Tag]:
        """Case-insensitive substring search (ILIKE with escaped wildcards)."""
        stmt = (
            select(tags_table)
            .where(tags_table.c.name.icontains(term, autoescape=True))
            .order_by(tags_table.c.name)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_all(self, limit: Optional[int] = None) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def delete(self, tag_id: TagId) -> bool:
        """Delete a tag. posts_tags rows are removed by ON DELETE CASCADE."""
        stmt = delete(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
