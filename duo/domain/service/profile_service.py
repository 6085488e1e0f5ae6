"""Profile domain service."""

from typing import Any

import logfire

from duo.domain.error import NotFoundError
from duo.domain.model import Profile
from duo.domain.model.common import utc_now
from duo.domain.repository import ProfileRepository
from duo.domain.value import Email, UserId

from .base import Service

# Fields a user may edit on their own profile
EDITABLE_FIELDS = frozenset({"full_name", "bio", "avatar_url", "partner_email"})


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_user_id(self, user_id: UserId) -> Profile:
        """Get profile by user ID.

        Args:
            user_id: User ID

        Returns:
            Profile entity

        Raises:
            NotFoundError: If profile not found
        """
        with logfire.span("profile_service.get_by_user_id", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def find_by_user_id(self, user_id: UserId) -> Profile | None:
        """Get profile by user ID, None if the user has none yet."""
        return await self.profile_repository.find_by_user_id(user_id)

    async def find_by_email(self, email: Email) -> Profile | None:
        """Get profile by account email.

        Args:
            email: Account email

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("profile_service.find_by_email"):
            profile = await self.profile_repository.find_by_email(email)
            if profile:
                logfire.info("Profile found by email", user_id=str(profile.user_id))
            else:
                logfire.info("No profile for email")
            return profile

    async def upsert(
        self,
        user_id: UserId,
        email: Email | None = None,
        **updates: Any,
    ) -> Profile:
        """Create the user's profile or update it in place.

        Args:
            user_id: User ID
            email: Verified account email, refreshed on every write when given
            **updates: Editable fields to set (full_name, bio, avatar_url,
                partner_email)

        Returns:
            Saved profile

        Raises:
            ValueError: If a non-editable field is passed
        """
        unknown = set(updates) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited: {sorted(unknown)}")

        with logfire.span(
            "profile_service.upsert", user_id=str(user_id), fields=sorted(updates)
        ):
            existing = await self.profile_repository.find_by_user_id(user_id)
            if email is not None:
                updates["email"] = email

            if existing:
                profile = existing.model_copy(
                    update={**updates, "updated_at": utc_now()}
                )
            else:
                profile = Profile(user_id=user_id, **updates)

            saved = await self.profile_repository.save(profile)
            logfire.info(
                "Profile saved",
                user_id=str(user_id),
                created=existing is None,
            )
            return saved
