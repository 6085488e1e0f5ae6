"""Test harness building DI containers for tests."""

import pytest_asyncio

from duo.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container (mocks for
    every component not listed in ``unmock``) and yields a request-scoped
    container for resolving services.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_issue_invitation(unit_env):
            service = await unit_env.get(InvitationService)
            invitation = await service.issue_invitation(user_id, email)
            assert invitation.status == InvitationStatus.PENDING
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
