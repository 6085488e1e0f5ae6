"""Tests for InMemoryInvitationRepository.

The in-memory store stands in for Postgres in unit tests, so it must enforce
the same uniqueness rules as the database.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from duo.domain.repository import InvitationRepository
from duo.domain.value import Email, InvitationStatus
from tests.factories import new_user_id, store_invitation
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInMemoryInvitationRepository:
    """Tests for the in-memory invitation store."""

    @pytest.mark.asyncio
    async def test_second_pending_for_same_pair_is_rejected(self, unit_env):
        repo = await unit_env.get(InvitationRepository)
        inviter_id = new_user_id()
        await store_invitation(repo, inviter_id, "partner@example.com")

        with pytest.raises(IntegrityError):
            await store_invitation(repo, inviter_id, "partner@example.com")

    @pytest.mark.asyncio
    async def test_duplicate_token_is_rejected(self, unit_env):
        repo = await unit_env.get(InvitationRepository)
        await store_invitation(repo, new_user_id(), "a@example.com", token="same")

        with pytest.raises(IntegrityError):
            await store_invitation(repo, new_user_id(), "b@example.com", token="same")

    @pytest.mark.asyncio
    async def test_update_status_is_compare_and_swap(self, unit_env):
        # Arrange
        repo = await unit_env.get(InvitationRepository)
        invitation = await store_invitation(repo, new_user_id(), "partner@example.com")
        accepter = new_user_id()

        # Act
        first = await repo.update_status(
            invitation.invitation_token,
            InvitationStatus.ACCEPTED,
            expected_status=InvitationStatus.PENDING,
            accepted_by_user_id=accepter,
        )
        second = await repo.update_status(
            invitation.invitation_token,
            InvitationStatus.EXPIRED,
            expected_status=InvitationStatus.PENDING,
        )

        # Assert
        assert (first, second) == (True, False)
        stored = await repo.find_by_token(invitation.invitation_token)
        assert stored.status == InvitationStatus.ACCEPTED
        assert stored.accepted_by_user_id == accepter

    @pytest.mark.asyncio
    async def test_find_pending_matches_normalized_email(self, unit_env):
        repo = await unit_env.get(InvitationRepository)
        inviter_id = new_user_id()
        invitation = await store_invitation(repo, inviter_id, "Partner@Example.com")

        found = await repo.find_pending(inviter_id, Email(root="partner@example.com"))

        assert found.id == invitation.id
