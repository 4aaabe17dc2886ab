"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from flashcastr.config import Settings
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    AfterCommit,
    FlashIdentificationRepository,
    FlashRepository,
    LinkedUserRepository,
)
from flashcastr.persistence.database import create_engine, create_session_factory
from flashcastr.persistence.repository import (
    PostgresActivityRecordRepository,
    PostgresFlashIdentificationRepository,
    PostgresFlashRepository,
    PostgresLinkedUserRepository,
)
from flashcastr.util.di.base import ProviderBase
from flashcastr.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app shuts down."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self) -> AfterCommit:
        return AfterCommit()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        after_commit: AfterCommit,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed at the end of the request if no exception occurred,
        rolled back otherwise. After-commit callbacks run only once the
        commit succeeds.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                after_commit.discard()
                raise
        after_commit.run()

    @provide(scope=Scope.REQUEST)
    def get_linked_user_repository(self, session: AsyncSession) -> LinkedUserRepository:
        return PostgresLinkedUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_activity_record_repository(
        self, session: AsyncSession
    ) -> ActivityRecordRepository:
        return PostgresActivityRecordRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_flash_repository(self, session: AsyncSession) -> FlashRepository:
        return PostgresFlashRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_flash_identification_repository(
        self, session: AsyncSession
    ) -> FlashIdentificationRepository:
        return PostgresFlashIdentificationRepository(session)
