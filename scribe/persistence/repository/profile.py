"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model.common import utcnow
from scribe.domain.model.profile import Profile
from scribe.domain.repository.profile import ProfileRepository
from scribe.domain.value import ProfileId, UserId
from scribe.persistence.mappers import row_to_profile
from scribe.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by its owner."""
        stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def upsert(
        self, profile_id: ProfileId, user_id: UserId, name: Optional[str]
    ) -> Profile:
        """INSERT ... ON CONFLICT (user_id) DO UPDATE."""
        now = utcnow()
        stmt = insert(profiles_table).values(
            id=profile_id,
            user_id=user_id,
            name=name,
            created_at=now,
            updated_at=now,
        )

        # An omitted name must not erase the stored one
        updates = {"updated_at": stmt.excluded.updated_at}
        if name is not None:
            updates["name"] = stmt.excluded.name

        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.user_id], set_=updates
        ).returning(*profiles_table.c)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_profile(row._asdict())
