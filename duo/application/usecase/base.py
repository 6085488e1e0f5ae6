"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One user-facing action.

    Takes a request DTO built by the interface layer and returns a response
    DTO. Domain errors pass through to the HTTP error handlers.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
