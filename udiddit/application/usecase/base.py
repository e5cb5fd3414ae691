"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Entry point for one operator-facing operation.

    Use cases take a pydantic request model, orchestrate domain services and
    return a response model (or None).
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
