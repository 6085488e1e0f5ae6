"""Unit tests for InvitationService."""

from datetime import timedelta
from urllib.parse import parse_qs, urlparse

import pytest

from duo.domain.model.common import utc_now
from duo.domain.repository import InvitationRepository
from duo.domain.service import InvitationService
from duo.domain.value import Email, InvitationStatus
from tests.factories import new_user_id, store_invitation
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIssueInvitation:
    """Tests for issue_invitation."""

    @pytest.mark.asyncio
    async def test_issue_creates_pending_invitation(self, unit_env):
        """A first invitation is pending and expires in seven days."""
        # Arrange
        service = await unit_env.get(InvitationService)
        inviter_id = new_user_id()
        before = utc_now()

        # Act
        invitation = await service.issue_invitation(
            inviter_id, Email(root="partner@example.com")
        )

        # Assert
        assert invitation.inviter_id == inviter_id
        assert invitation.invitee_email.root == "partner@example.com"
        assert invitation.status == InvitationStatus.PENDING
        assert invitation.accepted_at is None
        expected_expiry = before + timedelta(days=7)
        assert abs((invitation.expires_at - expected_expiry).total_seconds()) < 5

    @pytest.mark.asyncio
    async def test_token_is_long_and_unique(self, unit_env):
        """Tokens carry at least 128 bits and differ between invitations."""
        service = await unit_env.get(InvitationService)
        inviter_id = new_user_id()

        first = await service.issue_invitation(inviter_id, Email(root="a@example.com"))
        second = await service.issue_invitation(inviter_id, Email(root="b@example.com"))

        # 32 random bytes, base64url encoded
        assert len(first.invitation_token.root) >= 43
        assert first.invitation_token != second.invitation_token

    @pytest.mark.asyncio
    async def test_reissue_returns_same_invitation(self, unit_env):
        """Inviting the same address twice reuses the pending invitation."""
        # Arrange
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        inviter_id = new_user_id()

        # Act
        first = await service.issue_invitation(
            inviter_id, Email(root="partner@example.com")
        )
        second = await service.issue_invitation(
            inviter_id, Email(root="  Partner@Example.com ")
        )

        # Assert
        assert second.id == first.id
        assert second.invitation_token == first.invitation_token
        assert len(await repo.find_by_inviter(inviter_id)) == 1

    @pytest.mark.asyncio
    async def test_stale_pending_invitation_is_replaced(self, unit_env):
        """A pending invitation past its expiry is expired and a new one minted."""
        # Arrange
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        inviter_id = new_user_id()
        stale = await store_invitation(
            repo, inviter_id, "partner@example.com", expires_in=timedelta(hours=-1)
        )

        # Act
        fresh = await service.issue_invitation(
            inviter_id, Email(root="partner@example.com")
        )

        # Assert
        assert fresh.id != stale.id
        assert fresh.invitation_token != stale.invitation_token
        assert fresh.is_usable(utc_now())
        old = await repo.find_by_id(stale.id)
        assert old.status == InvitationStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_accepted_invitation_does_not_block_new_one(self, unit_env):
        """Only pending invitations count for reuse."""
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        inviter_id = new_user_id()
        accepted = await store_invitation(
            repo, inviter_id, "partner@example.com", status=InvitationStatus.ACCEPTED
        )

        fresh = await service.issue_invitation(
            inviter_id, Email(root="partner@example.com")
        )

        assert fresh.id != accepted.id
        assert fresh.status == InvitationStatus.PENDING


class TestStatusTransitions:
    """Tests for mark_accepted and mark_expired."""

    @pytest.mark.asyncio
    async def test_mark_accepted_only_once(self, unit_env):
        """The second acceptance of the same token is a no-op."""
        # Arrange
        service = await unit_env.get(InvitationService)
        invitation = await service.issue_invitation(
            new_user_id(), Email(root="partner@example.com")
        )
        accepter = new_user_id()

        # Act
        first = await service.mark_accepted(invitation.invitation_token, accepter)
        second = await service.mark_accepted(invitation.invitation_token, new_user_id())

        # Assert
        assert first is True
        assert second is False
        stored = await service.get_invitation_by_token(invitation.invitation_token)
        assert stored.status == InvitationStatus.ACCEPTED
        assert stored.accepted_by_user_id == accepter
        assert stored.accepted_at is not None

    @pytest.mark.asyncio
    async def test_expired_invitation_cannot_be_accepted(self, unit_env):
        """No transition leaves the expired state."""
        service = await unit_env.get(InvitationService)
        invitation = await service.issue_invitation(
            new_user_id(), Email(root="partner@example.com")
        )

        assert await service.mark_expired(invitation.invitation_token) is True
        assert (
            await service.mark_accepted(invitation.invitation_token, new_user_id())
            is False
        )

        stored = await service.get_invitation_by_token(invitation.invitation_token)
        assert stored.status == InvitationStatus.EXPIRED


class TestQueries:
    """Tests for lookups and listings."""

    @pytest.mark.asyncio
    async def test_get_by_unknown_token_returns_none(self, unit_env):
        from duo.domain.value import InvitationToken

        service = await unit_env.get(InvitationService)

        assert await service.get_invitation_by_token(InvitationToken(root="nope")) is None

    @pytest.mark.asyncio
    async def test_list_received_skips_unusable(self, unit_env):
        """Received invitations only include ones that can still be accepted."""
        # Arrange
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        usable = await store_invitation(repo, new_user_id(), "me@example.com")
        await store_invitation(
            repo, new_user_id(), "me@example.com", expires_in=timedelta(days=-1)
        )
        await store_invitation(
            repo, new_user_id(), "me@example.com", status=InvitationStatus.ACCEPTED
        )
        await store_invitation(repo, new_user_id(), "someone-else@example.com")

        # Act
        received = await service.list_received(Email(root="ME@example.com"))

        # Assert
        assert [invitation.id for invitation in received] == [usable.id]

    @pytest.mark.asyncio
    async def test_list_sent_filters_by_status(self, unit_env):
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        inviter_id = new_user_id()
        await store_invitation(repo, inviter_id, "one@example.com")
        await store_invitation(
            repo, inviter_id, "two@example.com", status=InvitationStatus.ACCEPTED
        )

        everything = await service.list_sent(inviter_id)
        pending = await service.list_sent(inviter_id, status=InvitationStatus.PENDING)

        assert len(everything) == 2
        assert [i.invitee_email.root for i in pending] == ["one@example.com"]

    @pytest.mark.asyncio
    async def test_invitation_link_carries_token(self, unit_env):
        """Links point at the frontend accept screen with the token as query."""
        service = await unit_env.get(InvitationService)
        invitation = await service.issue_invitation(
            new_user_id(), Email(root="partner@example.com")
        )

        link = service.build_invitation_link(invitation.invitation_token)

        parsed = urlparse(link)
        assert parsed.path == "/accept-invitation"
        assert parse_qs(parsed.query)["token"] == [invitation.invitation_token.root]
