"""Domain services."""

from .base import Service
from .couple_service import CoupleService
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .pairing_service import (
    ConnectOutcome,
    ConnectResult,
    InvitationMailer,
    PairingService,
)
from .profile_service import ProfileService

__all__ = [
    "ConnectOutcome",
    "ConnectResult",
    "CoupleService",
    "InvitationMailer",
    "InvitationService",
    "JWTService",
    "PairingService",
    "ProfileService",
    "Service",
]
