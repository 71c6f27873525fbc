"""Unit tests for InMemoryAdminInvitationRepository."""

from datetime import timedelta

import pytest

from adminvite.domain.error import ResourceConflictError
from adminvite.domain.model import AdminInvitation
from adminvite.domain.repository import RepositoryTestSupport
from adminvite.domain.value import Email, InvitationStatus, InvitationToken
from adminvite.persistence.repository.inmemory import (
    InMemoryAdminInvitationRepository,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInMemoryAdminInvitationRepository:
    """Tests for the in-memory repository contract."""

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, now):
        repo = InMemoryAdminInvitationRepository()

        saved = await repo.save(AdminInvitation.create_new("admin@example.com", now))

        assert saved.id is not None
        assert await repo.find_by_id(saved.id) == saved

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, now):
        repo = InMemoryAdminInvitationRepository()
        saved = await repo.save(AdminInvitation.create_new("Admin@Example.com", now))

        found = await repo.find_by_email(Email.create("admin@example.com"))

        assert found is not None
        assert found.id == saved.id
        assert found.email.root == "Admin@Example.com"

    @pytest.mark.asyncio
    async def test_find_by_email_returns_most_recent(self, now):
        repo = InMemoryAdminInvitationRepository()
        old = await repo.save(
            AdminInvitation.create_new("admin@example.com", now - timedelta(days=2))
        )
        await repo.save(old.expire())
        recent = await repo.save(AdminInvitation.create_new("admin@example.com", now))

        found = await repo.find_by_email(Email.create("admin@example.com"))

        assert found.id == recent.id

    @pytest.mark.asyncio
    async def test_find_pending_ignores_terminal_invitations(self, now):
        repo = InMemoryAdminInvitationRepository()
        saved = await repo.save(AdminInvitation.create_new("admin@example.com", now))
        await repo.save(saved.accept())

        assert await repo.find_pending_by_email(Email.create("admin@example.com")) is None

    @pytest.mark.asyncio
    async def test_find_by_token(self, now):
        repo = InMemoryAdminInvitationRepository()
        saved = await repo.save(AdminInvitation.create_new("admin@example.com", now))

        found = await repo.find_by_token(saved.invitation_token)
        missing = await repo.find_by_token(InvitationToken.create("unknown"))

        assert found.id == saved.id
        assert missing is None

    @pytest.mark.asyncio
    async def test_save_updates_existing(self, now):
        repo = InMemoryAdminInvitationRepository()
        saved = await repo.save(AdminInvitation.create_new("admin@example.com", now))

        await repo.save(saved.expire())

        stored = await repo.find_by_id(saved.id)
        assert stored.status == InvitationStatus.EXPIRED
        assert len(repo.all()) == 1

    @pytest.mark.asyncio
    async def test_second_pending_for_same_email_conflicts(self, now):
        repo = InMemoryAdminInvitationRepository()
        await repo.save(AdminInvitation.create_new("admin@example.com", now))

        with pytest.raises(ResourceConflictError):
            await repo.save(AdminInvitation.create_new("ADMIN@example.com", now))

    @pytest.mark.asyncio
    async def test_clear_by_ids_and_all(self, unit_env, now):
        support = await unit_env.get(RepositoryTestSupport)
        repo = await unit_env.get(InMemoryAdminInvitationRepository)
        first = await repo.save(AdminInvitation.create_new("a@example.com", now))
        second = await repo.save(AdminInvitation.create_new("b@example.com", now))

        await support.clear([first.id])
        assert await repo.find_by_id(first.id) is None
        assert await repo.find_by_id(second.id) is not None

        await support.clear()
        assert repo.all() == []
