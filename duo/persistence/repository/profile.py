"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import and_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from duo.domain.model import Profile
from duo.domain.repository import ProfileRepository
from duo.domain.value import CoupleId, Email, UserId
from duo.persistence.mappers import profile_to_dict, row_to_profile
from duo.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Args:
            user_id: User ID to look up

        Returns:
            Profile if found, None otherwise
        """
        stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[Profile]:
        """Find a profile by account email.

        Emails are stored lowercased, so an equality match is enough.

        Args:
            email: Account email

        Returns:
            Profile if found, None otherwise
        """
        stmt = (
            select(profiles_table)
            .where(profiles_table.c.email == email.root)
            .order_by(profiles_table.c.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile.

        couple_id is never written here; it only changes through
        link_couple/unlink_couple.

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        values = profile_to_dict(profile)
        values.pop("couple_id")

        stmt = insert(profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.user_id],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key not in ("user_id", "created_at")
            },
        ).returning(*profiles_table.c)

        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_profile(dict(result.mappings().one()))

    async def link_couple(self, user_ids: list[UserId], couple_id: CoupleId) -> int:
        """Set couple_id on unpaired profiles.

        Args:
            user_ids: Profiles to link
            couple_id: Couple to link them to

        Returns:
            Number of profiles updated
        """
        stmt = (
            update(profiles_table)
            .where(
                and_(
                    profiles_table.c.user_id.in_(user_ids),
                    profiles_table.c.couple_id.is_(None),
                )
            )
            .values(couple_id=couple_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def unlink_couple(self, couple_id: CoupleId) -> None:
        """Clear couple_id on profiles pointing at the couple.

        Args:
            couple_id: Couple being rolled back
        """
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.couple_id == couple_id)
            .values(couple_id=None)
        )
        await self.session.execute(stmt)
        await self.session.flush()
