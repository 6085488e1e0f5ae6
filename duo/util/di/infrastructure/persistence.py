"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from duo.config import Settings
from duo.domain.repository import (
    CoupleRepository,
    InvitationRepository,
    ProfileRepository,
    UnitOfWork,
)
from duo.persistence.database import create_engine, create_session_factory
from duo.persistence.repository import (
    PostgresCoupleRepository,
    PostgresInvitationRepository,
    PostgresProfileRepository,
    SqlAlchemyUnitOfWork,
)
from duo.util.di.base import ProviderBase
from duo.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Nothing is committed here; services commit through the UnitOfWork
        at the points where their writes must be durable. Work still
        uncommitted when the request scope closes is rolled back.
        """
        async with session_factory() as session:
            yield session
            if session.in_transaction():
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work over the request session."""
        return SqlAlchemyUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_couple_repository(self, session: AsyncSession) -> CoupleRepository:
        """Provide Couple repository."""
        return PostgresCoupleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)
