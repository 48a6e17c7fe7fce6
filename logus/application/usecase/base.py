"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Orchestrates domain services for one API operation.

    Use cases take a pydantic request model and return a pydantic response
    model; domain errors propagate to the router for HTTP mapping.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
