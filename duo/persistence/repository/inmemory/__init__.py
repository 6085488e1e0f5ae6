"""In-memory repository implementations for testing."""

from .couple import InMemoryCoupleRepository
from .invitation import InMemoryInvitationRepository
from .profile import InMemoryProfileRepository
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryCoupleRepository",
    "InMemoryInvitationRepository",
    "InMemoryProfileRepository",
    "InMemoryUnitOfWork",
]
