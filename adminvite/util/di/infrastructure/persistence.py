"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from adminvite.config import Settings
from adminvite.domain.repository import (
    AdminInvitationRepository,
    LoadAdminInvitationPort,
    RepositoryTestSupport,
    SaveAdminInvitationPort,
)
from adminvite.persistence.database import create_engine, create_session_factory
from adminvite.persistence.repository import PostgresAdminInvitationRepository
from adminvite.persistence.repository.inmemory import (
    InMemoryAdminInvitationRepository,
)
from adminvite.util.di.base import ProviderBase
from adminvite.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the process-wide database engine."""
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
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Repository writes commit on their own; anything left pending is
        committed at the end of the request, or rolled back if an exception
        was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_admin_invitation_repository(
        self, session: AsyncSession
    ) -> AdminInvitationRepository:
        """Provide AdminInvitation repository."""
        return PostgresAdminInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_load_admin_invitation_port(
        self, repository: AdminInvitationRepository
    ) -> LoadAdminInvitationPort:
        """Provide invitation lookups."""
        return repository

    @provide(scope=Scope.REQUEST)
    def get_save_admin_invitation_port(
        self, repository: AdminInvitationRepository
    ) -> SaveAdminInvitationPort:
        """Provide invitation persistence."""
        return repository

    @provide(scope=Scope.REQUEST)
    def get_repository_test_support(
        self, repository: AdminInvitationRepository
    ) -> RepositoryTestSupport:
        """Provide invitation cleanup for tests."""
        return repository


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory repository.

    APP scope so invitations survive across requests for the life of the
    container (one container per test keeps tests isolated).
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_in_memory_repository(self) -> InMemoryAdminInvitationRepository:
        """Provide the in-memory repository."""
        return InMemoryAdminInvitationRepository()

    @provide
    def get_admin_invitation_repository(
        self, repository: InMemoryAdminInvitationRepository
    ) -> AdminInvitationRepository:
        """Provide AdminInvitation repository."""
        return repository

    @provide
    def get_load_admin_invitation_port(
        self, repository: InMemoryAdminInvitationRepository
    ) -> LoadAdminInvitationPort:
        """Provide invitation lookups."""
        return repository

    @provide
    def get_save_admin_invitation_port(
        self, repository: InMemoryAdminInvitationRepository
    ) -> SaveAdminInvitationPort:
        """Provide invitation persistence."""
        return repository

    @provide
    def get_repository_test_support(
        self, repository: InMemoryAdminInvitationRepository
    ) -> RepositoryTestSupport:
        """Provide invitation cleanup for tests."""
        return repository
