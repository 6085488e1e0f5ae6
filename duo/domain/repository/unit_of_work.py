"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request.

    Writes made through the repositories become durable only on commit.
    Anything left uncommitted when the request ends is discarded.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every write since the last commit durable."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every write since the last commit."""
        pass
