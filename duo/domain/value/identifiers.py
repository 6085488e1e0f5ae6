"""Strongly typed identifiers for Duo domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# User identity is owned by the auth platform; profiles are keyed by it
UserId = NewType("UserId", UUID)
CoupleId = NewType("CoupleId", UUID)
InvitationId = NewType("InvitationId", UUID)
