"""In-memory profile repository for testing."""

from typing import Optional

from duo.domain.model import Profile
from duo.domain.repository import ProfileRepository
from duo.domain.value import CoupleId, Email, UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        return self._profiles.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[Profile]:
        """Find a profile by account email."""
        matches = [p for p in self._profiles.values() if p.email == email]
        matches.sort(key=lambda p: p.created_at)
        return matches[0] if matches else None

    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile, leaving couple_id untouched."""
        existing = self._profiles.get(profile.user_id)
        if existing:
            profile = profile.model_copy(
                update={
                    "couple_id": existing.couple_id,
                    "created_at": existing.created_at,
                }
            )
        else:
            profile = profile.model_copy(update={"couple_id": None})
        self._profiles[profile.user_id] = profile
        return profile

    async def link_couple(self, user_ids: list[UserId], couple_id: CoupleId) -> int:
        """Set couple_id on the given profiles that are not yet paired."""
        updated = 0
        for user_id in user_ids:
            profile = self._profiles.get(user_id)
            if profile is None or profile.couple_id is not None:
                continue
            self._profiles[user_id] = profile.model_copy(
                update={"couple_id": couple_id}
            )
            updated += 1
        return updated

    async def unlink_couple(self, couple_id: CoupleId) -> None:
        """Clear couple_id on profiles pointing at the couple."""
        for user_id, profile in list(self._profiles.items()):
            if profile.couple_id == couple_id:
                self._profiles[user_id] = profile.model_copy(
                    update={"couple_id": None}
                )
