"""PostgreSQL repository implementations."""

from duo.persistence.repository.couple import PostgresCoupleRepository
from duo.persistence.repository.invitation import PostgresInvitationRepository
from duo.persistence.repository.profile import PostgresProfileRepository
from duo.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "PostgresProfileRepository",
    "PostgresCoupleRepository",
    "PostgresInvitationRepository",
    "SqlAlchemyUnitOfWork",
]
