"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: validates a request model, calls domain services
    and shapes the response model. Domain errors propagate to the route."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
