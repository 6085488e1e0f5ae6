"""In-memory invitation repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from duo.domain.model import Invitation
from duo.domain.model.common import utc_now
from duo.domain.repository import InvitationRepository
from duo.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: list[Invitation] = []

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations:
            if invitation.invitation_token == token:
                return invitation
        return None

    async def find_pending(
        self, inviter_id: UserId, invitee_email: Email
    ) -> Optional[Invitation]:
        """Find the pending invitation for an inviter/email pair."""
        for invitation in self._invitations:
            if (
                invitation.inviter_id == inviter_id
                and invitation.invitee_email == invitee_email
                and invitation.status == InvitationStatus.PENDING
            ):
                return invitation
        return None

    async def find_pending_by_email(self, invitee_email: Email) -> list[Invitation]:
        """Find pending invitations addressed to an email, newest first."""
        matches = [
            invitation
            for invitation in self._invitations
            if invitation.invitee_email == invitee_email
            and invitation.status == InvitationStatus.PENDING
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If a pending invitation already exists for the pair
                or the token is already taken
        """
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation.id:
                self._invitations[i] = invitation
                return invitation

        if await self.find_by_token(invitation.invitation_token):
            raise IntegrityError("Duplicate invitation token", None, Exception())

        if invitation.status == InvitationStatus.PENDING and await self.find_pending(
            invitation.inviter_id, invitation.invitee_email
        ):
            raise IntegrityError("Duplicate pending invitation", None, Exception())

        self._invitations.append(invitation)
        return invitation

    async def update_status(
        self,
        token: InvitationToken,
        new_status: InvitationStatus,
        expected_status: InvitationStatus,
        accepted_by_user_id: UserId | None = None,
    ) -> bool:
        """Move an invitation to a new status if it is in the expected one."""
        for i, invitation in enumerate(self._invitations):
            if invitation.invitation_token != token:
                continue
            if invitation.status != expected_status:
                return False

            now = utc_now()
            update = {"status": new_status, "updated_at": now}
            if new_status == InvitationStatus.ACCEPTED:
                update["accepted_at"] = now
                update["accepted_by_user_id"] = accepted_by_user_id
            self._invitations[i] = invitation.model_copy(update=update)
            return True
        return False

    async def find_by_inviter(
        self,
        inviter_id: UserId,
        status: Optional[InvitationStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invitation]:
        """Find invitations by inviter with pagination."""
        matches = []
        for invitation in self._invitations:
            if invitation.inviter_id != inviter_id:
                continue
            if status is None or invitation.status == status:
                matches.append(invitation)

        matches.sort(key=lambda inv: inv.created_at, reverse=True)

        return matches[offset : offset + limit]
