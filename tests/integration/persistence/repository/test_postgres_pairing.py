"""Integration tests for the PostgreSQL repositories.

These run against a migrated database (``DATABASE__URL``) and check the
constraints that keep pairing consistent under concurrency.
"""

import os
from uuid import uuid4

import pytest

from duo.domain.model import Couple
from duo.domain.repository import (
    CoupleRepository,
    InvitationRepository,
    ProfileRepository,
)
from duo.domain.value import CoupleId, Email, InvitationStatus
from tests.factories import new_user_id, register_user, store_invitation
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="requires a PostgreSQL database"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique_email(name: str) -> str:
    return f"{name}-{uuid4().hex[:12]}@example.com"


class TestPostgresInvitationRepository:
    """Integration tests for PostgresInvitationRepository."""

    @pytest.mark.asyncio
    async def test_find_by_token_round_trip(self, integration_env):
        # Arrange
        repo = await integration_env.get(InvitationRepository)
        inviter_id = new_user_id()
        email = unique_email("partner")
        invitation = await store_invitation(repo, inviter_id, email)

        # Act
        found = await repo.find_by_token(invitation.invitation_token)

        # Assert
        assert found.id == invitation.id
        assert found.invitee_email == Email(root=email)
        assert found.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_update_status_only_from_expected(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        invitation = await store_invitation(repo, new_user_id(), unique_email("p"))
        accepter = new_user_id()

        first = await repo.update_status(
            invitation.invitation_token,
            InvitationStatus.ACCEPTED,
            expected_status=InvitationStatus.PENDING,
            accepted_by_user_id=accepter,
        )
        second = await repo.update_status(
            invitation.invitation_token,
            InvitationStatus.ACCEPTED,
            expected_status=InvitationStatus.PENDING,
            accepted_by_user_id=new_user_id(),
        )

        assert (first, second) == (True, False)
        stored = await repo.find_by_token(invitation.invitation_token)
        assert stored.accepted_by_user_id == accepter


class TestPostgresProfileRepository:
    """Integration tests for PostgresProfileRepository."""

    @pytest.mark.asyncio
    async def test_link_couple_is_conditional(self, integration_env):
        """A profile that is already linked is not relinked."""
        # Arrange
        profiles = await integration_env.get(ProfileRepository)
        couples = await integration_env.get(CoupleRepository)
        alice = await register_user(profiles, unique_email("alice"))
        bob = await register_user(profiles, unique_email("bob"))
        carol = await register_user(profiles, unique_email("carol"))
        dana = await register_user(profiles, unique_email("dana"))
        first = await couples.create(
            Couple(id=CoupleId(uuid4()), user1_id=alice.user_id, user2_id=bob.user_id)
        )
        await profiles.link_couple([alice.user_id, bob.user_id], first.id)
        second = await couples.create(
            Couple(id=CoupleId(uuid4()), user1_id=carol.user_id, user2_id=dana.user_id)
        )

        # Act
        linked = await profiles.link_couple([carol.user_id, bob.user_id], second.id)

        # Assert
        assert linked == 1
        assert (await profiles.find_by_user_id(bob.user_id)).couple_id == first.id

    @pytest.mark.asyncio
    async def test_save_keeps_couple_link(self, integration_env):
        profiles = await integration_env.get(ProfileRepository)
        couples = await integration_env.get(CoupleRepository)
        alice = await register_user(profiles, unique_email("alice"))
        bob = await register_user(profiles, unique_email("bob"))
        couple = await couples.create(
            Couple(id=CoupleId(uuid4()), user1_id=alice.user_id, user2_id=bob.user_id)
        )
        await profiles.link_couple([alice.user_id, bob.user_id], couple.id)

        saved = await profiles.save(alice.model_copy(update={"bio": "Updated"}))

        assert saved.bio == "Updated"
        assert saved.couple_id == couple.id
