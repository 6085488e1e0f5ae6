"""SQLAlchemy implementation of the unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from duo.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the request's shared session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the session the request's repositories use.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        logfire.info("Rolling back unit of work")
        await self.session.rollback()
