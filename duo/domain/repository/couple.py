"""Couple repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from duo.domain.model.couple import Couple
from duo.domain.value import CoupleId, UserId


class CoupleRepository(ABC):
    """Repository for Couple entity.

    Defines the contract for couple persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, couple_id: CoupleId) -> Optional[Couple]:
        """Find a couple by ID.

        Args:
            couple_id: The couple's unique identifier

        Returns:
            The couple if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[Couple]:
        """Find the couple a user belongs to, on either side.

        Args:
            user_id: The user's identifier

        Returns:
            The couple if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, couple: Couple) -> Couple:
        """Insert a new couple.

        Args:
            couple: The couple to insert

        Returns:
            The inserted couple

        Raises:
            IntegrityError: If either user already belongs to a couple
        """
        pass

    @abstractmethod
    async def delete(self, couple_id: CoupleId) -> None:
        """Delete a couple.

        Only used to compensate a pairing that could not be completed.

        Args:
            couple_id: The couple to delete
        """
        pass
