"""Invitation entity.

Invitations bridge "I want to pair with this email" until the owner of that
email has an account and accepts.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from duo.domain.model.common import DomainModel, utc_now
from duo.domain.value import Email, InvitationId, InvitationStatus, InvitationToken, UserId


class Invitation(DomainModel):
    """Partner invitation entity.

    Business rules:
    - One pending invitation per inviter/email combination
    - Status only moves pending -> accepted or pending -> expired
    - Acceptable only while pending and before expires_at
    - Only the owner of invitee_email may accept it
    """

    id: InvitationId
    inviter_id: UserId
    invitee_email: Email
    invitation_token: InvitationToken
    status: InvitationStatus = InvitationStatus.PENDING
    expires_at: datetime
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    accepted_at: Optional[datetime] = None
    accepted_by_user_id: Optional[UserId] = None

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def is_usable(self, now: datetime) -> bool:
        """Whether the invitation can still be accepted at the given time."""
        return self.status == InvitationStatus.PENDING and not self.is_expired(now)
