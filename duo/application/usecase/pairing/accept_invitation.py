"""Accept invitation use case."""

from datetime import datetime

from pydantic import BaseModel

from duo.application.usecase.base import BaseUseCase
from duo.application.usecase.common import parse_email, parse_token, parse_user_id
from duo.domain.service import PairingService


class AcceptInvitationRequest(BaseModel):
    """Accept invitation request."""

    token: str
    user_id: str  # From authenticated user
    user_email: str  # Verified email from the access token


class AcceptInvitationResponse(BaseModel):
    """Accept invitation response."""

    couple_id: str
    partner_user_id: str
    created_at: datetime
    message: str = "Invitation accepted! You are now connected with your partner"


class AcceptInvitationUseCase(
    BaseUseCase[AcceptInvitationRequest, AcceptInvitationResponse]
):
    """Use case for accepting a partner invitation.

    Maps one-to-one onto PairingService.accept_invitation; every refusal is a
    domain error the interface layer turns into a status code.
    """

    def __init__(self, pairing_service: PairingService) -> None:
        self.pairing_service = pairing_service

    async def execute(self, request: AcceptInvitationRequest) -> AcceptInvitationResponse:
        user_id = parse_user_id(request.user_id)
        couple = await self.pairing_service.accept_invitation(
            parse_token(request.token), user_id, parse_email(request.user_email)
        )
        return AcceptInvitationResponse(
            couple_id=str(couple.id),
            partner_user_id=str(couple.partner_of(user_id)),
            created_at=couple.created_at,
        )
