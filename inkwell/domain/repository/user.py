"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.user import User
from inkwell.domain.value import CounterField, UserId
from inkwell.domain.value.types import Username


class UserRepository(ABC):
    """Repository for the User aggregate (the account directory)."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query).

        Unknown IDs are skipped.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        pass

    @abstractmethod
    async def search_by_username(self, query: str, limit: int = 50) -> List[User]:
        """Find users whose username contains the query, ignoring case.

        Args:
            query: Substring to look for
            limit: Maximum number of users to return

        Returns:
            Matching users ordered by username
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def apply_delta(self, user_id: UserId, field: CounterField, delta: int) -> bool:
        """Atomically add a signed delta to a counter (floored at 0).

        Returns:
            True if the user existed and was updated
        """
        pass
