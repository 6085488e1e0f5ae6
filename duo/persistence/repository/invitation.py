"""PostgreSQL implementation of Invitation repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from duo.domain.model import Invitation
from duo.domain.model.common import utc_now
from duo.domain.repository import InvitationRepository
from duo.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)
from duo.persistence.mappers import invitation_to_dict, row_to_invitation
from duo.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: Invitation ID to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token.

        Args:
            token: Invitation token to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(
            invitations_table.c.invitation_token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_pending(
        self, inviter_id: UserId, invitee_email: Email
    ) -> Optional[Invitation]:
        """Find the pending invitation for an inviter/email pair.

        Backed by the partial unique index on pending invitations.
        """
        stmt = select(invitations_table).where(
            and_(
                invitations_table.c.inviter_id == inviter_id,
                invitations_table.c.invitee_email == invitee_email.root,
                invitations_table.c.status == InvitationStatus.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_pending_by_email(self, invitee_email: Email) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.invitee_email == invitee_email.root,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                )
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings()]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Inserts run in a savepoint so a duplicate pending invitation can be
        recovered from by the caller.

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation

        Raises:
            IntegrityError: If a pending invitation already exists for the pair
        """
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)

        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
            await self.session.execute(stmt)
            await self.session.flush()
        else:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(invitations_table).values(**invitation_dict)
                )

        return invitation

    async def update_status(
        self,
        token: InvitationToken,
        new_status: InvitationStatus,
        expected_status: InvitationStatus,
        accepted_by_user_id: UserId | None = None,
    ) -> bool:
        """Conditionally move an invitation to a new status.

        The status check is part of the UPDATE's WHERE clause, so the row lock
        decides between concurrent callers.

        Args:
            token: Invitation token
            new_status: Status to move to
            expected_status: Status the row must currently have
            accepted_by_user_id: Recorded when moving to accepted

        Returns:
            True if a row was updated
        """
        now = utc_now()
        values = {"status": new_status.value, "updated_at": now}
        if new_status == InvitationStatus.ACCEPTED:
            values["accepted_at"] = now
            values["accepted_by_user_id"] = accepted_by_user_id

        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.invitation_token == token.root,
                    invitations_table.c.status == expected_status.value,
                )
            )
            .values(**values)
            .returning(invitations_table.c.id)
        )
        result = await self.session.execute(stmt)
        updated = result.first() is not None
        await self.session.flush()
        return updated

    async def find_by_inviter(
        self,
        inviter_id: UserId,
        status: Optional[InvitationStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invitation]:
        """Find invitations by inviter with pagination.

        Args:
            inviter_id: Inviter user ID
            status: Optional filter by status
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations ordered by creation date (newest first)
        """
        stmt = select(invitations_table).where(
            invitations_table.c.inviter_id == inviter_id
        )

        if status:
            stmt = stmt.where(invitations_table.c.status == status.value)

        stmt = (
            stmt.order_by(invitations_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings()]
