"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case.

    A use case takes one request model, coordinates domain services and
    returns one response model. Domain errors propagate to the caller.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
