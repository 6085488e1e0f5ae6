"""Get invitation use case."""

from datetime import datetime
from enum import Enum

import logfire
from pydantic import BaseModel

from duo.application.usecase.base import BaseUseCase
from duo.application.usecase.common import parse_token
from duo.domain.model.common import utc_now
from duo.domain.service import InvitationService, ProfileService
from duo.domain.value import InvitationStatus


class InvalidReason(str, Enum):
    """Why an invitation link cannot be used."""

    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    ALREADY_USED = "already_used"


class GetInvitationRequest(BaseModel):
    """Get invitation request."""

    token: str


class GetInvitationResponse(BaseModel):
    """Get invitation response."""

    valid: bool
    reason: InvalidReason | None = None
    status: InvitationStatus | None = None
    inviter_name: str | None = None
    invitee_email: str | None = None
    expires_at: datetime | None = None
    message: str


class GetInvitationUseCase(
    BaseUseCase[GetInvitationRequest, GetInvitationResponse]
):
    """Use case for checking an invitation link before accepting it.

    Lets the accept screen show who sent the invitation, or why it can no
    longer be used, before asking the user to sign in.
    """

    def __init__(
        self, invitation_service: InvitationService, profile_service: ProfileService
    ) -> None:
        """Initialize get invitation use case.

        Args:
            invitation_service: Invitation domain service
            profile_service: Profile domain service
        """
        self.invitation_service = invitation_service
        self.profile_service = profile_service

    async def execute(self, request: GetInvitationRequest) -> GetInvitationResponse:
        """Look up an invitation by token.

        Args:
            request: Request with the token from the link

        Returns:
            Validity and display details
        """
        token = parse_token(request.token)

        with logfire.span("get_invitation.execute", token=token.redacted()):
            invitation = await self.invitation_service.get_invitation_by_token(token)

            if not invitation:
                return GetInvitationResponse(
                    valid=False,
                    reason=InvalidReason.NOT_FOUND,
                    message="Invalid invitation link",
                )

            if invitation.is_expired(utc_now()):
                return GetInvitationResponse(
                    valid=False,
                    reason=InvalidReason.EXPIRED,
                    status=invitation.status,
                    expires_at=invitation.expires_at,
                    message="This invitation has expired",
                )

            if invitation.status != InvitationStatus.PENDING:
                return GetInvitationResponse(
                    valid=False,
                    reason=InvalidReason.ALREADY_USED,
                    status=invitation.status,
                    message="This invitation has already been used",
                )

            inviter = await self.profile_service.find_by_user_id(invitation.inviter_id)

            return GetInvitationResponse(
                valid=True,
                status=invitation.status,
                inviter_name=inviter.display_name() if inviter else None,
                invitee_email=invitation.invitee_email.root,
                expires_at=invitation.expires_at,
                message="Valid invitation",
            )
