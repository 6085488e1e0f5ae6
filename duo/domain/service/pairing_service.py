"""Pairing domain service.

Turns "I want to connect with partner@example.com" into either an immediate
couple or a durable invitation, and turns a received invitation into a couple.
"""

from abc import ABC, abstractmethod
import asyncio
from dataclasses import dataclass
from enum import Enum

import logfire

from duo.domain.error import (
    EmailMismatchError,
    InvalidInvitationTokenError,
    InvitationAlreadyUsedError,
    InvitationExpiredError,
    InviterNotFoundError,
    PartnerNotFoundError,
    SelfPairingError,
)
from duo.domain.model import Couple, Invitation
from duo.domain.model.common import utc_now
from duo.domain.repository import UnitOfWork
from duo.domain.value import (
    Email,
    EmailDeliveryOutcome,
    InvitationStatus,
    InvitationToken,
    UserId,
)

from .base import Service
from .couple_service import CoupleService
from .invitation_service import InvitationService
from .profile_service import ProfileService


class InvitationMailer(ABC):
    """Outbound email interface for partner invitations."""

    @abstractmethod
    async def send_invitation_email(
        self, to_address: Email, inviter_display_name: str, invitation_link: str
    ) -> EmailDeliveryOutcome:
        """Send the invitation email.

        Args:
            to_address: Invitee address
            inviter_display_name: Name shown as the sender of the invitation
            invitation_link: Link carrying the invitation token

        Returns:
            Delivery outcome

        Raises:
            AdapterError: If the provider could not be reached
        """
        pass


class ConnectOutcome(str, Enum):
    """How a connect request was resolved."""

    PAIRED = "paired"
    INVITATION_ISSUED = "invitation_issued"


@dataclass
class ConnectResult:
    """Result of connect_with_partner.

    PAIRED carries the couple; INVITATION_ISSUED carries the invitation, its
    link and what happened to the email.
    """

    outcome: ConnectOutcome
    couple: Couple | None = None
    invitation: Invitation | None = None
    invitation_link: str | None = None
    email_delivery: EmailDeliveryOutcome | None = None


class PairingService(Service):
    """Domain service orchestrating partner pairing."""

    def __init__(
        self,
        profile_service: ProfileService,
        couple_service: CoupleService,
        invitation_service: InvitationService,
        mailer: InvitationMailer,
        unit_of_work: UnitOfWork,
        email_timeout_seconds: float = 5.0,
    ) -> None:
        """Initialize pairing service.

        Args:
            profile_service: Profile domain service
            couple_service: Couple domain service
            invitation_service: Invitation domain service
            mailer: Outbound invitation email sender
            unit_of_work: Transaction boundary of the current request
            email_timeout_seconds: Upper bound on the email send
        """
        self.profile_service = profile_service
        self.couple_service = couple_service
        self.invitation_service = invitation_service
        self.mailer = mailer
        self.unit_of_work = unit_of_work
        self.email_timeout_seconds = email_timeout_seconds

    async def connect_with_partner(
        self, user_id: UserId, user_email: Email, partner_email: Email
    ) -> ConnectResult:
        """Pair with a partner directly, or invite them if they have no account.

        Steps:
        1. Reject pairing with one's own address
        2. Record partner_email on the caller's profile and commit it, so
           intent is recorded even if the rest fails
        3. Try to create the couple (partner already registered)
        4. Otherwise issue an invitation, commit it, then email it best-effort

        Args:
            user_id: Authenticated user
            user_email: Authenticated user's verified email
            partner_email: Address the user wants to pair with

        Returns:
            PAIRED or INVITATION_ISSUED result

        Raises:
            SelfPairingError: If partner_email is the user's own address
            AlreadyPairedError: If either side is already paired
        """
        if partner_email == user_email:
            raise SelfPairingError()

        with logfire.span("pairing_service.connect_with_partner", user_id=str(user_id)):
            # Intent is recorded even if the rest fails
            profile = await self.profile_service.upsert(
                user_id, email=user_email, partner_email=partner_email
            )
            await self.unit_of_work.commit()

            try:
                couple = await self.couple_service.create_couple(user_id, partner_email)
            except PartnerNotFoundError:
                logfire.info("Partner not registered, issuing invitation")
            else:
                await self.unit_of_work.commit()
                logfire.info("Paired directly", couple_id=str(couple.id))
                return ConnectResult(outcome=ConnectOutcome.PAIRED, couple=couple)

            invitation = await self.invitation_service.issue_invitation(
                user_id, partner_email
            )
            # Durable before the email goes out
            await self.unit_of_work.commit()
            link = self.invitation_service.build_invitation_link(
                invitation.invitation_token
            )
            delivery = await self._send_invitation_email(
                partner_email, profile.display_name(), link
            )

            logfire.info(
                "Invitation issued for connect",
                invitation_id=str(invitation.id),
                email_delivered=delivery.delivered,
            )
            return ConnectResult(
                outcome=ConnectOutcome.INVITATION_ISSUED,
                invitation=invitation,
                invitation_link=link,
                email_delivery=delivery,
            )

    async def accept_invitation(
        self,
        token: InvitationToken,
        current_user_id: UserId,
        current_user_email: Email,
    ) -> Couple:
        """Accept an invitation on behalf of the signed-in invitee.

        Nothing is committed unless the couple was created, so a failed
        acceptance leaves the invitation pending and can simply be retried.

        Args:
            token: Invitation token from the link
            current_user_id: Authenticated user
            current_user_email: Authenticated user's verified email

        Returns:
            Created couple

        Raises:
            InvalidInvitationTokenError: Unknown token
            InvitationExpiredError: Past expires_at
            InvitationAlreadyUsedError: Not pending, or lost a concurrent accept
            EmailMismatchError: Signed in with a different address
            InviterNotFoundError: Inviter's profile is gone
            AlreadyPairedError: Either side is already paired
        """
        with logfire.span(
            "pairing_service.accept_invitation",
            token=token.redacted(),
            user_id=str(current_user_id),
        ):
            invitation = await self.invitation_service.get_invitation_by_token(token)
            if not invitation:
                raise InvalidInvitationTokenError(token.root)

            if invitation.is_expired(utc_now()):
                logfire.info("Invitation expired", invitation_id=str(invitation.id))
                raise InvitationExpiredError()

            if invitation.status != InvitationStatus.PENDING:
                logfire.info(
                    "Invitation already used",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
                raise InvitationAlreadyUsedError(invitation.status.value)

            if current_user_email != invitation.invitee_email:
                logfire.warn(
                    "Invitation email mismatch",
                    invitation_id=str(invitation.id),
                    user_id=str(current_user_id),
                )
                raise EmailMismatchError()

            await self.profile_service.upsert(
                current_user_id,
                email=current_user_email,
                partner_email=invitation.invitee_email,
            )

            inviter = await self.profile_service.find_by_user_id(invitation.inviter_id)
            if not inviter:
                logfire.error(
                    "Inviter profile missing", inviter_id=str(invitation.inviter_id)
                )
                raise InviterNotFoundError(str(invitation.inviter_id))

            couple = await self.couple_service.pair(inviter.user_id, current_user_id)

            accepted = await self.invitation_service.mark_accepted(
                token, current_user_id
            )
            if not accepted:
                # A concurrent acceptance won the status transition
                await self.couple_service.revert(couple)
                raise InvitationAlreadyUsedError(InvitationStatus.ACCEPTED.value)

            await self.unit_of_work.commit()
            logfire.info(
                "Invitation accepted, couple created",
                invitation_id=str(invitation.id),
                couple_id=str(couple.id),
            )
            return couple

    async def _send_invitation_email(
        self, to_address: Email, inviter_display_name: str, link: str
    ) -> EmailDeliveryOutcome:
        """Send the invitation email without ever failing the caller.

        The invitation row is the source of truth; a failed or slow send is
        reported so the inviter can share the link by hand.
        """
        try:
            return await asyncio.wait_for(
                self.mailer.send_invitation_email(to_address, inviter_display_name, link),
                timeout=self.email_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logfire.warn(
                "Invitation email timed out", timeout_seconds=self.email_timeout_seconds
            )
            return EmailDeliveryOutcome(
                delivered=False, provider_error="Email delivery timed out"
            )
        except Exception as e:
            logfire.error(
                "Invitation email failed", error=str(e), error_type=type(e).__name__
            )
            return EmailDeliveryOutcome(delivered=False, provider_error=str(e))
