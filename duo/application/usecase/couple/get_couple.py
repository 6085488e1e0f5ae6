"""Get couple use case."""

from datetime import datetime

from pydantic import BaseModel

from duo.application.usecase.base import BaseUseCase
from duo.application.usecase.common import parse_user_id
from duo.domain.error import NotFoundError
from duo.domain.service import CoupleService


class PartnerProfile(BaseModel):
    """Partner details visible to the other member of the couple."""

    user_id: str
    email: str | None
    full_name: str | None
    bio: str | None
    avatar_url: str | None


class GetCoupleRequest(BaseModel):
    """Get couple request."""

    user_id: str  # From authenticated user


class GetCoupleResponse(BaseModel):
    """Get couple response."""

    couple_id: str
    partner_user_id: str
    partner: PartnerProfile | None  # None if the partner's account was removed
    created_at: datetime


class GetCoupleUseCase(BaseUseCase[GetCoupleRequest, GetCoupleResponse]):
    """Use case for reading the user's couple and partner profile."""

    def __init__(self, couple_service: CoupleService) -> None:
        self.couple_service = couple_service

    async def execute(self, request: GetCoupleRequest) -> GetCoupleResponse:
        """Get the user's couple.

        Raises:
            NotFoundError: If the user is not paired
        """
        user_id = parse_user_id(request.user_id)
        found = await self.couple_service.get_partner_profile(user_id)
        if found is None:
            raise NotFoundError("Couple", request.user_id)

        couple, partner = found
        return GetCoupleResponse(
            couple_id=str(couple.id),
            partner_user_id=str(couple.partner_of(user_id)),
            partner=(
                PartnerProfile(
                    user_id=str(partner.user_id),
                    email=partner.email.root if partner.email else None,
                    full_name=partner.full_name,
                    bio=partner.bio,
                    avatar_url=partner.avatar_url,
                )
                if partner
                else None
            ),
            created_at=couple.created_at,
        )
