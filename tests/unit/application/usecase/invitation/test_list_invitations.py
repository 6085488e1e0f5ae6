"""Tests for list invitations use cases."""

import pytest

from duo.application.usecase.invitation import (
    ListReceivedInvitationsRequest,
    ListReceivedInvitationsUseCase,
    ListSentInvitationsRequest,
    ListSentInvitationsUseCase,
)
from duo.domain.repository import InvitationRepository, ProfileRepository
from duo.domain.value import InvitationStatus
from tests.factories import register_user, store_invitation
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListSentInvitationsUseCase:
    """Tests for ListSentInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_with_links(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListSentInvitationsUseCase)
        profiles = await unit_env.get(ProfileRepository)
        invitations = await unit_env.get(InvitationRepository)
        alice = await register_user(profiles, "alice@example.com")
        invitation = await store_invitation(
            invitations, alice.user_id, "partner@example.com"
        )

        # Act
        response = await use_case.execute(
            ListSentInvitationsRequest(user_id=str(alice.user_id))
        )

        # Assert
        assert response.total == 1
        item = response.invitations[0]
        assert item.invitation_id == str(invitation.id)
        assert item.invitee_email == "partner@example.com"
        assert item.invitation_link.endswith(
            f"?token={invitation.invitation_token.root}"
        )

    @pytest.mark.asyncio
    async def test_status_filter(self, unit_env):
        use_case = await unit_env.get(ListSentInvitationsUseCase)
        profiles = await unit_env.get(ProfileRepository)
        invitations = await unit_env.get(InvitationRepository)
        alice = await register_user(profiles, "alice@example.com")
        await store_invitation(invitations, alice.user_id, "one@example.com")
        await store_invitation(
            invitations,
            alice.user_id,
            "two@example.com",
            status=InvitationStatus.EXPIRED,
        )

        response = await use_case.execute(
            ListSentInvitationsRequest(
                user_id=str(alice.user_id), status=InvitationStatus.EXPIRED
            )
        )

        assert [i.invitee_email for i in response.invitations] == ["two@example.com"]


class TestListReceivedInvitationsUseCase:
    """Tests for ListReceivedInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_pending_for_account_email(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListReceivedInvitationsUseCase)
        profiles = await unit_env.get(ProfileRepository)
        invitations = await unit_env.get(InvitationRepository)
        alice = await register_user(profiles, "alice@example.com", full_name="Alice")
        await store_invitation(invitations, alice.user_id, "partner@example.com")

        # Act
        response = await use_case.execute(
            ListReceivedInvitationsRequest(user_email="Partner@Example.com")
        )

        # Assert
        assert response.total == 1
        assert response.invitations[0].inviter_name == "Alice"
        assert response.invitations[0].inviter_id == str(alice.user_id)
