"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, Field

from duo.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from duo.domain.service import JWTService
from duo.interface.api.auth import authenticate

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current profile."""

    full_name: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=2048)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ProfileResponse:
    """Get the signed-in user's profile."""
    payload = authenticate(jwt_service, authorization)
    return await get_profile_use_case.execute(
        GetProfileRequest(user_id=payload.user_id)
    )


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ProfileResponse:
    """Create or update the signed-in user's profile.

    Only fields present in the body are changed.
    """
    payload = authenticate(jwt_service, authorization)
    use_case_request = UpdateProfileRequest(
        user_id=payload.user_id,
        user_email=payload.email,
        **request.model_dump(exclude_unset=True),
    )
    return await update_profile_use_case.execute(use_case_request)
