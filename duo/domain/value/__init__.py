"""Domain value objects for Duo."""

from duo.domain.value.identifiers import CoupleId, InvitationId, UserId
from duo.domain.value.types import (
    Email,
    EmailDeliveryOutcome,
    InvitationStatus,
    InvitationToken,
)

__all__ = [
    # Identifiers
    "UserId",
    "CoupleId",
    "InvitationId",
    # Types
    "Email",
    "EmailDeliveryOutcome",
    "InvitationStatus",
    "InvitationToken",
]
