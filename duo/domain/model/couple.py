"""Couple entity."""

from datetime import datetime

from pydantic import Field, model_validator

from duo.domain.model.common import DomainModel, utc_now
from duo.domain.value import CoupleId, UserId


class Couple(DomainModel):
    """Durable link between exactly two user accounts.

    Business rules:
    - user1_id and user2_id are different users
    - Each user belongs to at most one couple
    - Immutable once created (no re-pairing)
    """

    id: CoupleId
    user1_id: UserId
    user2_id: UserId
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def check_distinct_members(self) -> "Couple":
        if self.user1_id == self.user2_id:
            raise ValueError("A couple needs two different users")
        return self

    def includes(self, user_id: UserId) -> bool:
        return user_id in (self.user1_id, self.user2_id)

    def partner_of(self, user_id: UserId) -> UserId:
        """Return the other member of the couple.

        Raises:
            ValueError: If user_id is not a member
        """
        if user_id == self.user1_id:
            return self.user2_id
        if user_id == self.user2_id:
            return self.user1_id
        raise ValueError(f"User {user_id} is not part of couple {self.id}")
