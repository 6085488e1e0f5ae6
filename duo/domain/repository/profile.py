"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from duo.domain.model.profile import Profile
from duo.domain.value import CoupleId, Email, UserId


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    Defines the contract for profile persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by its user ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[Profile]:
        """Find a profile by its account email.

        Used to resolve "does my partner already have an account".

        Args:
            email: Account email

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (insert or update keyed by user_id).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def link_couple(self, user_ids: list[UserId], couple_id: CoupleId) -> int:
        """Set couple_id on the given profiles where it is still unset.

        This is a conditional update: profiles that already carry a couple_id
        are left alone, so a caller can detect a lost race by comparing the
        returned count to the number of users.

        Args:
            user_ids: Profiles to link
            couple_id: Couple to link them to

        Returns:
            Number of profiles updated
        """
        pass

    @abstractmethod
    async def unlink_couple(self, couple_id: CoupleId) -> None:
        """Clear couple_id on every profile pointing at the couple.

        Args:
            couple_id: Couple being rolled back
        """
        pass
