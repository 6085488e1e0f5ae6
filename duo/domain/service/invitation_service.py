"""Invitation domain service."""

import secrets
from datetime import timedelta
from urllib.parse import urlencode
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from duo.config import InvitationSettings
from duo.domain.model.common import utc_now
from duo.domain.model.invitation import Invitation
from duo.domain.repository import InvitationRepository
from duo.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)

from .base import Service


class InvitationService(Service):
    """Domain service for the partner invitation ledger."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        settings: InvitationSettings,
        accept_url: str,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            settings: Invitation settings (expiry, token size)
            accept_url: Frontend URL that tokens are appended to
        """
        self.invitation_repository = invitation_repository
        self.settings = settings
        self.accept_url = accept_url

    async def issue_invitation(
        self, inviter_id: UserId, invitee_email: Email
    ) -> Invitation:
        """Issue an invitation, reusing the pending one if there is one.

        Re-inviting the same address returns the existing invitation
        unchanged. A pending invitation that has already run out is moved to
        expired and replaced, so a dead link is never handed out again.

        Args:
            inviter_id: User sending the invitation
            invitee_email: Address being invited

        Returns:
            Pending, usable invitation
        """
        with logfire.span(
            "invitation_service.issue_invitation", inviter_id=str(inviter_id)
        ):
            existing = await self.invitation_repository.find_pending(
                inviter_id, invitee_email
            )
            if existing:
                if existing.is_usable(utc_now()):
                    logfire.info(
                        "Reusing pending invitation",
                        invitation_id=str(existing.id),
                        token=existing.invitation_token.redacted(),
                    )
                    return existing

                await self.mark_expired(existing.invitation_token)

            now = utc_now()
            invitation = Invitation(
                id=InvitationId(uuid4()),
                inviter_id=inviter_id,
                invitee_email=invitee_email,
                invitation_token=self._generate_token(),
                status=InvitationStatus.PENDING,
                expires_at=now + timedelta(days=self.settings.expiry_days),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.invitation_repository.save(invitation)
            except IntegrityError:
                # A concurrent request created the pending invitation first
                winner = await self.invitation_repository.find_pending(
                    inviter_id, invitee_email
                )
                if winner is None:
                    raise
                logfire.info(
                    "Concurrent issuance, returning existing invitation",
                    invitation_id=str(winner.id),
                )
                return winner

            logfire.info(
                "Invitation issued",
                invitation_id=str(saved.id),
                inviter_id=str(inviter_id),
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def get_invitation_by_token(
        self, token: InvitationToken
    ) -> Invitation | None:
        """Get invitation by token.

        Args:
            token: Invitation token

        Returns:
            Invitation if found, None otherwise
        """
        with logfire.span(
            "invitation_service.get_invitation_by_token", token=token.redacted()
        ):
            invitation = await self.invitation_repository.find_by_token(token)
            if invitation:
                logfire.info(
                    "Invitation found",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
            else:
                logfire.warn("Invitation not found", token=token.redacted())
            return invitation

    async def mark_accepted(
        self, token: InvitationToken, accepted_by_user_id: UserId
    ) -> bool:
        """Move a pending invitation to accepted.

        A second call is a harmless no-op.

        Args:
            token: Invitation token
            accepted_by_user_id: User who accepted

        Returns:
            True if this call performed the transition
        """
        with logfire.span(
            "invitation_service.mark_accepted",
            token=token.redacted(),
            accepted_by_user_id=str(accepted_by_user_id),
        ):
            updated = await self.invitation_repository.update_status(
                token,
                InvitationStatus.ACCEPTED,
                expected_status=InvitationStatus.PENDING,
                accepted_by_user_id=accepted_by_user_id,
            )
            if updated:
                logfire.info("Invitation accepted", token=token.redacted())
            else:
                logfire.info("Invitation was not pending", token=token.redacted())
            return updated

    async def mark_expired(self, token: InvitationToken) -> bool:
        """Move a pending invitation to expired.

        Args:
            token: Invitation token

        Returns:
            True if this call performed the transition
        """
        with logfire.span("invitation_service.mark_expired", token=token.redacted()):
            updated = await self.invitation_repository.update_status(
                token,
                InvitationStatus.EXPIRED,
                expected_status=InvitationStatus.PENDING,
            )
            if updated:
                logfire.info("Invitation expired", token=token.redacted())
            return updated

    async def list_sent(
        self,
        inviter_id: UserId,
        status: InvitationStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invitation]:
        """List invitations sent by a user.

        Args:
            inviter_id: User ID
            status: Optional status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations
        """
        with logfire.span(
            "invitation_service.list_sent",
            inviter_id=str(inviter_id),
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            invitations = await self.invitation_repository.find_by_inviter(
                inviter_id, status, limit, offset
            )
            logfire.info(
                "Invitations listed", inviter_id=str(inviter_id), count=len(invitations)
            )
            return invitations

    async def list_received(self, invitee_email: Email) -> list[Invitation]:
        """List invitations addressed to an email that can still be accepted.

        Args:
            invitee_email: Account email of the invitee

        Returns:
            Usable pending invitations, newest first
        """
        with logfire.span("invitation_service.list_received"):
            now = utc_now()
            pending = await self.invitation_repository.find_pending_by_email(
                invitee_email
            )
            usable = [invitation for invitation in pending if invitation.is_usable(now)]
            logfire.info("Received invitations listed", count=len(usable))
            return usable

    def build_invitation_link(self, token: InvitationToken) -> str:
        """Build the link the invitee opens to accept.

        Args:
            token: Invitation token

        Returns:
            Absolute URL carrying the token in its query string
        """
        return f"{self.accept_url}?{urlencode({'token': token.root})}"

    def _generate_token(self) -> InvitationToken:
        """Generate an unguessable, URL-safe token."""
        return InvitationToken(root=secrets.token_urlsafe(self.settings.token_bytes))
