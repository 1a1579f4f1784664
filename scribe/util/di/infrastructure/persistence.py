"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from scribe.config import Settings
from scribe.domain.repository import (
    AfterCommit,
    PostRepository,
    PostTagRepository,
    ProfileRepository,
    TagRepository,
)
from scribe.persistence.database import create_engine, create_session_factory
from scribe.persistence.repository import (
    PostgresPostRepository,
    PostgresPostTagRepository,
    PostgresProfileRepository,
    PostgresTagRepository,
)
from scribe.util.di.base import ProviderBase
from scribe.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self) -> AfterCommit:
        """Provide the request's post-commit hooks."""
        return AfterCommit()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        after_commit: AfterCommit,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised
        or the request was cancelled by the error handler.
        Post-commit hooks run only after a successful commit.
        """
        async with session_factory() as session:
            try:
                yield session
                if after_commit.cancelled:
                    logfire.warn("Session rollback", reason="request failed")
                    await session.rollback()
                else:
                    await session.commit()
                    logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

        await after_commit.run()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_tag_repository(self, session: AsyncSession) -> PostTagRepository:
        """Provide posts_tags repository."""
        return PostgresPostTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)
