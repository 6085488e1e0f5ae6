"""Invitation repository interface."""

from abc import ABC, abstractmethod

from duo.domain.model.invitation import Invitation
from duo.domain.value import Email, InvitationId, InvitationStatus, InvitationToken, UserId


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Invitation | None:
        """Find an invitation by token.

        Used when the invitee opens the invitation link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending(
        self, inviter_id: UserId, invitee_email: Email
    ) -> Invitation | None:
        """Find the pending invitation from an inviter to an email.

        Args:
            inviter_id: The inviter's ID
            invitee_email: The invited address

        Returns:
            The pending invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_by_email(self, invitee_email: Email) -> list[Invitation]:
        """Find all pending invitations addressed to an email.

        Args:
            invitee_email: The invited address

        Returns:
            Pending invitations, newest first
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation

        Raises:
            IntegrityError: If a pending invitation already exists for this
                inviter/email pair
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        token: InvitationToken,
        new_status: InvitationStatus,
        expected_status: InvitationStatus,
        accepted_by_user_id: UserId | None = None,
    ) -> bool:
        """Move an invitation to a new status if it is in the expected one.

        Compare-and-swap: of two concurrent callers, at most one succeeds.

        Args:
            token: The invitation token
            new_status: Status to move to
            expected_status: Status the invitation must currently have
            accepted_by_user_id: Recorded when moving to accepted

        Returns:
            True if the invitation was updated, False otherwise
        """
        pass

    @abstractmethod
    async def find_by_inviter(
        self,
        inviter_id: UserId,
        status: InvitationStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invitation]:
        """Find invitations by inviter with pagination.

        Args:
            inviter_id: The inviter's ID
            status: Optional status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations, newest first
        """
        pass
