"""In-memory follow-up repository for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from inkwell.domain.model.common import utcnow
from inkwell.domain.model.follow_up import FollowUp
from inkwell.domain.repository.follow_up import FollowUpRepository
from inkwell.domain.value import FollowUpId, FollowUpStatus

from .store import InMemoryStore


class InMemoryFollowUpRepository(FollowUpRepository):
    """In-memory implementation of FollowUpRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._follow_ups = store.follow_ups

    async def add(self, follow_up: FollowUp) -> bool:
        """Record a follow-up unless its key is taken."""
        if await self.find_by_key(follow_up.key) is not None:
            return False
        self._follow_ups[follow_up.id] = follow_up
        return True

    async def find_by_key(self, key: str) -> Optional[FollowUp]:
        """Find a follow-up by key."""
        for follow_up in self._follow_ups.values():
            if follow_up.key == key:
                return follow_up
        return None

    async def find_pending(self, limit: int = 100) -> list[FollowUp]:
        """Find pending follow-ups, oldest first."""
        pending = [f for f in self._follow_ups.values() if f.is_pending]
        pending.sort(key=lambda f: f.created_at)
        return pending[:limit]

    async def mark_applied(self, follow_up_id: FollowUpId) -> None:
        """Mark a follow-up as applied."""
        follow_up = self._follow_ups.get(follow_up_id)
        if follow_up is not None:
            self._follow_ups[follow_up_id] = follow_up.model_copy(
                update={"status": FollowUpStatus.APPLIED, "applied_at": utcnow()}
            )

    async def record_failure(
        self, follow_up_id: FollowUpId, error: str, max_attempts: int
    ) -> Optional[FollowUp]:
        """Count a failed attempt; fail the follow-up once attempts run out."""
        follow_up = self._follow_ups.get(follow_up_id)
        if follow_up is None:
            return None
        attempts = follow_up.attempts + 1
        updated = follow_up.model_copy(
            update={
                "attempts": attempts,
                "last_error": error,
                "status": (
                    FollowUpStatus.FAILED
                    if attempts >= max_attempts
                    else FollowUpStatus.PENDING
                ),
            }
        )
        self._follow_ups[follow_up_id] = updated
        return updated

    @asynccontextmanager
    async def isolated(self) -> AsyncIterator[None]:
        """Undo every write of the block if it raises."""
        snapshot = self._store.snapshot()
        try:
            yield
        except Exception:
            self._store.restore(snapshot)
            raise
