"""Profile aggregate root.

One profile per authenticated user. Holds display data, the partner email the
user has declared, and the back-reference to the couple once paired.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from duo.domain.model.common import DomainModel, utc_now
from duo.domain.value import CoupleId, Email, UserId


class Profile(DomainModel):
    """Profile aggregate root.

    Business rules:
    - At most one profile per user
    - couple_id is set exactly once, when pairing succeeds
    - email mirrors the verified account email from the auth platform
    """

    user_id: UserId
    email: Optional[Email] = None  # Verified account email
    full_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    partner_email: Optional[Email] = None  # Address the user wants to pair with
    couple_id: Optional[CoupleId] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_paired(self) -> bool:
        return self.couple_id is not None

    def display_name(self) -> str:
        """Name shown to a partner in invitation emails."""
        if self.full_name:
            return self.full_name
        if self.email:
            return self.email.root
        return "Someone"
