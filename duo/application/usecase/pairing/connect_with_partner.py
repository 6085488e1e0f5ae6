"""Connect with partner use case."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import BaseModel

from duo.application.usecase.base import BaseUseCase
from duo.application.usecase.common import parse_email, parse_user_id
from duo.domain.service import ConnectOutcome, PairingService


class ConnectWithPartnerRequest(BaseModel):
    """Connect with partner request."""

    user_id: str  # From authenticated user
    user_email: str  # Verified email from the access token
    partner_email: str


class ConnectWithPartnerResponse(BaseModel):
    """Connect with partner response.

    When the partner was invited instead of paired, the link is always
    returned so it can be shared by hand if the email did not go out.
    """

    outcome: ConnectOutcome
    message: str
    couple_id: str | None = None
    partner_user_id: str | None = None
    invitation_id: str | None = None
    invitation_token: str | None = None
    invitation_link: str | None = None
    expires_at: datetime | None = None
    email_sent: bool = False
    email_error: Any = None


class ConnectWithPartnerUseCase(
    BaseUseCase[ConnectWithPartnerRequest, ConnectWithPartnerResponse]
):
    """Use case for the "connect with my partner" screen."""

    def __init__(self, pairing_service: PairingService) -> None:
        """Initialize connect with partner use case.

        Args:
            pairing_service: Pairing domain service
        """
        self.pairing_service = pairing_service

    async def execute(
        self, request: ConnectWithPartnerRequest
    ) -> ConnectWithPartnerResponse:
        """Pair with the partner, or invite them.

        Args:
            request: Connect request

        Returns:
            Outcome with couple or invitation details

        Raises:
            ValidationError: Empty, malformed or own email
            AlreadyPairedError: Either side is already paired
        """
        user_id = parse_user_id(request.user_id)
        user_email = parse_email(request.user_email)
        partner_email = parse_email(
            request.partner_email, "Please enter your partner's email"
        )

        with logfire.span("connect_with_partner.execute", user_id=request.user_id):
            result = await self.pairing_service.connect_with_partner(
                user_id, user_email, partner_email
            )

        if result.outcome == ConnectOutcome.PAIRED:
            couple = result.couple
            return ConnectWithPartnerResponse(
                outcome=result.outcome,
                message="You are now connected with your partner",
                couple_id=str(couple.id),
                partner_user_id=str(couple.partner_of(user_id)),
            )

        invitation = result.invitation
        delivery = result.email_delivery
        return ConnectWithPartnerResponse(
            outcome=result.outcome,
            message=(
                "Invitation sent successfully via email"
                if delivery.delivered
                else "Invitation created successfully. Share the link with your partner."
            ),
            invitation_id=str(invitation.id),
            invitation_token=invitation.invitation_token.root,
            invitation_link=result.invitation_link,
            expires_at=invitation.expires_at,
            email_sent=delivery.delivered,
            email_error=delivery.provider_error,
        )
