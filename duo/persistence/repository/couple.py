"""PostgreSQL implementation of Couple repository."""

from typing import Optional

from sqlalchemy import delete, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from duo.domain.model import Couple
from duo.domain.repository import CoupleRepository
from duo.domain.value import CoupleId, UserId
from duo.persistence.mappers import couple_to_dict, row_to_couple
from duo.persistence.tables import couples_table


class PostgresCoupleRepository(CoupleRepository):
    """PostgreSQL implementation of CoupleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, couple_id: CoupleId) -> Optional[Couple]:
        stmt = select(couples_table).where(couples_table.c.id == couple_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_couple(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> Optional[Couple]:
        """Find the couple a user belongs to.

        Args:
            user_id: User ID on either side of the couple

        Returns:
            Couple if found, None otherwise
        """
        stmt = select(couples_table).where(
            or_(couples_table.c.user1_id == user_id, couples_table.c.user2_id == user_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_couple(dict(row)) if row else None

    async def create(self, couple: Couple) -> Couple:
        """Insert a new couple.

        Runs in a savepoint so a unique violation leaves the request
        transaction usable.

        Args:
            couple: Couple to insert

        Returns:
            Inserted couple

        Raises:
            IntegrityError: If either user already appears in a couple
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(couples_table).values(**couple_to_dict(couple))
            )
        return couple

    async def delete(self, couple_id: CoupleId) -> None:
        stmt = delete(couples_table).where(couples_table.c.id == couple_id)
        await self.session.execute(stmt)
        await self.session.flush()
