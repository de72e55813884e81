"""Follow-up repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional

from inkwell.domain.model.follow_up import FollowUp
from inkwell.domain.value import FollowUpId


class FollowUpRepository(ABC):
    """Repository for recorded follow-ups (the outbox)."""

    @abstractmethod
    async def add(self, follow_up: FollowUp) -> bool:
        """Record a follow-up unless one with the same key exists.

        Returns:
            True if recorded, False if the key was already present
        """
        pass

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[FollowUp]:
        """Find a follow-up by its idempotency key."""
        pass

    @abstractmethod
    async def find_pending(self, limit: int = 100) -> List[FollowUp]:
        """Find pending follow-ups, oldest first."""
        pass

    @abstractmethod
    async def mark_applied(self, follow_up_id: FollowUpId) -> None:
        """Mark a follow-up as applied."""
        pass

    @abstractmethod
    async def record_failure(
        self, follow_up_id: FollowUpId, error: str, max_attempts: int
    ) -> Optional[FollowUp]:
        """Count a failed attempt.

        The follow-up becomes FAILED once its attempts reach max_attempts,
        otherwise it stays PENDING.

        Returns:
            The updated follow-up, or None if it does not exist
        """
        pass

    @abstractmethod
    def isolated(self) -> AbstractAsyncContextManager[None]:
        """Scope in which one follow-up is applied.

        Work done inside is rolled back on error without affecting the
        surrounding request (a savepoint in SQL stores).
        """
        pass
