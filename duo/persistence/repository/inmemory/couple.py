"""In-memory couple repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from duo.domain.model import Couple
from duo.domain.repository import CoupleRepository
from duo.domain.value import CoupleId, UserId


class InMemoryCoupleRepository(CoupleRepository):
    """In-memory implementation of CoupleRepository for testing."""

    def __init__(self) -> None:
        self._couples: dict[CoupleId, Couple] = {}

    async def find_by_id(self, couple_id: CoupleId) -> Optional[Couple]:
        """Find a couple by ID."""
        return self._couples.get(couple_id)

    async def find_by_user(self, user_id: UserId) -> Optional[Couple]:
        """Find the couple a user belongs to."""
        for couple in self._couples.values():
            if couple.includes(user_id):
                return couple
        return None

    async def create(self, couple: Couple) -> Couple:
        """Insert a new couple.

        Raises:
            IntegrityError: If either user already belongs to a couple
        """
        for existing in self._couples.values():
            if existing.includes(couple.user1_id) or existing.includes(couple.user2_id):
                raise IntegrityError("Duplicate couple member", None, Exception())
        self._couples[couple.id] = couple
        return couple

    async def delete(self, couple_id: CoupleId) -> None:
        """Delete a couple."""
        self._couples.pop(couple_id, None)
