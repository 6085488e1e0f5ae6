"""Get profile use case."""

from datetime import datetime

from pydantic import BaseModel

from duo.application.usecase.base import BaseUseCase
from duo.application.usecase.common import parse_user_id
from duo.domain.model import Profile
from duo.domain.service import ProfileService


class ProfileResponse(BaseModel):
    """Profile as returned to its owner."""

    user_id: str
    email: str | None
    full_name: str | None
    bio: str | None
    avatar_url: str | None
    partner_email: str | None
    couple_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            user_id=str(profile.user_id),
            email=profile.email.root if profile.email else None,
            full_name=profile.full_name,
            bio=profile.bio,
            avatar_url=profile.avatar_url,
            partner_email=profile.partner_email.root if profile.partner_email else None,
            couple_id=str(profile.couple_id) if profile.couple_id else None,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # From authenticated user


class GetProfileUseCase(BaseUseCase[GetProfileRequest, ProfileResponse]):
    """Use case for reading the signed-in user's profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Get the user's profile.

        Raises:
            NotFoundError: If the user has no profile yet
        """
        profile = await self.profile_service.get_by_user_id(
            parse_user_id(request.user_id)
        )
        return ProfileResponse.from_profile(profile)
