"""In-memory user repository for testing."""

from typing import Optional, Sequence

from inkwell.domain.model.user import User
from inkwell.domain.repository.user import UserRepository
from inkwell.domain.value import CounterField, UserId
from inkwell.domain.value.types import Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._users = store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users by IDs."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def search_by_username(self, query: str, limit: int = 50) -> list[User]:
        """Find users whose username contains the query (case-insensitive)."""
        needle = query.lower()
        matches = [u for u in self._users.values() if needle in u.username.root.lower()]
        matches.sort(key=lambda u: u.username.root)
        return matches[:limit]

    async def save(self, user: User) -> User:
        """Save a user. Counters of an existing user are kept."""
        existing = self._users.get(user.id)
        if existing is not None:
            user = user.model_copy(
                update={
                    "total_posts": existing.total_posts,
                    "total_reads": existing.total_reads,
                }
            )
        self._users[user.id] = user
        return user

    async def apply_delta(self, user_id: UserId, field: CounterField, delta: int) -> bool:
        """Add a delta to a counter (floored at 0)."""
        user = self._users.get(user_id)
        if user is None:
            return False
        current = getattr(user, field.value)
        self._users[user_id] = user.model_copy(
            update={field.value: max(current + delta, 0)}
        )
        return True
