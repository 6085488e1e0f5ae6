"""List invitations use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from duo.application.usecase.base import BaseUseCase
from duo.application.usecase.common import parse_email, parse_user_id
from duo.domain.service import InvitationService, ProfileService
from duo.domain.value import InvitationStatus


class SentInvitationItem(BaseModel):
    """Invitation the user has sent."""

    invitation_id: str
    invitee_email: str
    invitation_token: str
    invitation_link: str
    status: InvitationStatus
    expires_at: datetime
    created_at: datetime
    accepted_at: datetime | None = None


class ListSentInvitationsRequest(BaseModel):
    """List sent invitations request."""

    user_id: str  # From authenticated user
    status: InvitationStatus | None = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListSentInvitationsResponse(BaseModel):
    """List sent invitations response."""

    invitations: list[SentInvitationItem]
    total: int


class ListSentInvitationsUseCase(
    BaseUseCase[ListSentInvitationsRequest, ListSentInvitationsResponse]
):
    """Use case for listing invitations a user has sent."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: ListSentInvitationsRequest
    ) -> ListSentInvitationsResponse:
        invitations = await self.invitation_service.list_sent(
            inviter_id=parse_user_id(request.user_id),
            status=request.status,
            limit=request.limit,
            offset=request.offset,
        )

        items = [
            SentInvitationItem(
                invitation_id=str(invitation.id),
                invitee_email=invitation.invitee_email.root,
                invitation_token=invitation.invitation_token.root,
                invitation_link=self.invitation_service.build_invitation_link(
                    invitation.invitation_token
                ),
                status=invitation.status,
                expires_at=invitation.expires_at,
                created_at=invitation.created_at,
                accepted_at=invitation.accepted_at,
            )
            for invitation in invitations
        ]
        return ListSentInvitationsResponse(invitations=items, total=len(items))


class ReceivedInvitationItem(BaseModel):
    """Invitation addressed to the user that can still be accepted."""

    invitation_id: str
    invitation_token: str
    inviter_id: str
    inviter_name: str | None = None
    expires_at: datetime
    created_at: datetime


class ListReceivedInvitationsRequest(BaseModel):
    """List received invitations request."""

    user_email: str  # Verified email from the access token


class ListReceivedInvitationsResponse(BaseModel):
    """List received invitations response."""

    invitations: list[ReceivedInvitationItem]
    total: int


class ListReceivedInvitationsUseCase(
    BaseUseCase[ListReceivedInvitationsRequest, ListReceivedInvitationsResponse]
):
    """Use case for listing pending invitations addressed to the user.

    Lets a partner who signed up without opening the email still find and
    accept the invitation.
    """

    def __init__(
        self, invitation_service: InvitationService, profile_service: ProfileService
    ) -> None:
        """Initialize list received invitations use case.

        Args:
            invitation_service: Invitation domain service
            profile_service: Profile domain service
        """
        self.invitation_service = invitation_service
        self.profile_service = profile_service

    async def execute(
        self, request: ListReceivedInvitationsRequest
    ) -> ListReceivedInvitationsResponse:
        invitations = await self.invitation_service.list_received(
            parse_email(request.user_email)
        )

        items = []
        for invitation in invitations:
            inviter = await self.profile_service.find_by_user_id(invitation.inviter_id)
            items.append(
                ReceivedInvitationItem(
                    invitation_id=str(invitation.id),
                    invitation_token=invitation.invitation_token.root,
                    inviter_id=str(invitation.inviter_id),
                    inviter_name=inviter.display_name() if inviter else None,
                    expires_at=invitation.expires_at,
                    created_at=invitation.created_at,
                )
            )
        return ListReceivedInvitationsResponse(invitations=items, total=len(items))
