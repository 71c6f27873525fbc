"""Test harness for unit and integration tests.

Integration tests assume PostgreSQL is running with migrations applied
(``python scripts/run_migrations.py``) and DATABASE__URL pointing at it.
"""

import os

import pytest
import pytest_asyncio

from adminvite.config import Settings
from adminvite.util.di import Component
from tests.di import build_test_container

requires_database = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="DATABASE__URL is not set",
)


def create_env_fixture(
    unmock: set[Component] | None = None, settings: Settings | None = None
):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container (and any database engine) afterwards

    Args:
        unmock: Components to use real implementations for
        settings: Settings override for the container

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save(integration_env):
            repo = await integration_env.get(AdminInvitationRepository)
            saved = await repo.save(invitation)
            assert saved.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set(), settings=settings)

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
