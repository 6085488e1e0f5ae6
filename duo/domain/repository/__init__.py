"""Repository interfaces for the Duo domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from duo.domain.repository.couple import CoupleRepository
from duo.domain.repository.invitation import InvitationRepository
from duo.domain.repository.profile import ProfileRepository
from duo.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "ProfileRepository",
    "CoupleRepository",
    "InvitationRepository",
    "UnitOfWork",
]
