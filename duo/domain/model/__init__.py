"""Domain model entities for Duo."""

from duo.domain.model.couple import Couple
from duo.domain.model.invitation import Invitation
from duo.domain.model.profile import Profile

__all__ = [
    "Profile",
    "Couple",
    "Invitation",
]
