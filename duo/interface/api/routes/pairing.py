"""Pairing routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from duo.application.usecase.pairing import (
    ConnectWithPartnerRequest,
    ConnectWithPartnerResponse,
    ConnectWithPartnerUseCase,
)
from duo.domain.service import JWTService
from duo.interface.api.auth import authenticate

router = APIRouter(prefix="/pairing", tags=["pairing"], route_class=DishkaRoute)


class ConnectAPIRequest(BaseModel):
    """API request for connecting with a partner."""

    partner_email: str


@router.post("/connect", response_model=ConnectWithPartnerResponse)
async def connect_with_partner(
    request: ConnectAPIRequest,
    connect_use_case: FromDishka[ConnectWithPartnerUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ConnectWithPartnerResponse:
    """Pair with a registered partner, or invite them by email.

    Args:
        request: Partner email
        connect_use_case: Connect use case from DI
        jwt_service: JWT service from DI
        authorization: Bearer token header

    Returns:
        ``paired`` with the couple, or ``invitation_issued`` with the link and
        email delivery result
    """
    payload = authenticate(jwt_service, authorization)
    return await connect_use_case.execute(
        ConnectWithPartnerRequest(
            user_id=payload.user_id,
            user_email=payload.email,
            partner_email=request.partner_email,
        )
    )
