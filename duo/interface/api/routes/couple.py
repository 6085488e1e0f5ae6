"""Couple routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from duo.application.usecase.couple import (
    GetCoupleRequest,
    GetCoupleResponse,
    GetCoupleUseCase,
)
from duo.domain.service import JWTService
from duo.interface.api.auth import authenticate

router = APIRouter(prefix="/couple", tags=["couple"], route_class=DishkaRoute)


@router.get("", response_model=GetCoupleResponse)
async def get_my_couple(
    get_couple_use_case: FromDishka[GetCoupleUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetCoupleResponse:
    """Get the signed-in user's couple and partner profile.

    Returns 404 while the user is not paired.
    """
    payload = authenticate(jwt_service, authorization)
    return await get_couple_use_case.execute(GetCoupleRequest(user_id=payload.user_id))
