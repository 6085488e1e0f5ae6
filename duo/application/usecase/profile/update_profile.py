"""Update profile use case."""

from pydantic import BaseModel, Field

from duo.application.usecase.base import BaseUseCase
from duo.application.usecase.common import parse_email, parse_user_id
from duo.application.usecase.profile.get_profile import ProfileResponse
from duo.domain.repository import UnitOfWork
from duo.domain.service import ProfileService


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Only fields explicitly present in the request are changed.
    """

    user_id: str  # From authenticated user
    user_email: str  # Verified email from the access token
    full_name: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=2048)


class UpdateProfileUseCase(BaseUseCase[UpdateProfileRequest, ProfileResponse]):
    """Use case for editing the signed-in user's profile.

    Creates the profile on first edit. partner_email and couple_id are not
    editable here; they change only through pairing.
    """

    def __init__(
        self, profile_service: ProfileService, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
            unit_of_work: Transaction boundary of the current request
        """
        self.profile_service = profile_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute update profile flow.

        Steps:
        1. Collect the fields present in the request
        2. Upsert the profile, refreshing the account email, and commit
        3. Return the saved profile

        Args:
            request: Request with user identity and fields to update

        Returns:
            Updated profile
        """
        updates = request.model_dump(
            include={"full_name", "bio", "avatar_url"}, exclude_unset=True
        )
        profile = await self.profile_service.upsert(
            parse_user_id(request.user_id),
            email=parse_email(request.user_email),
            **updates,
        )
        await self.unit_of_work.commit()
        return ProfileResponse.from_profile(profile)
