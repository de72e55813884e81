"""PostgreSQL implementation of FollowUp repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import case, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import FollowUp
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import FollowUpRepository
from inkwell.domain.value import FollowUpId, FollowUpStatus
from inkwell.persistence.database import storage_guard
from inkwell.persistence.mappers import follow_up_to_dict, row_to_follow_up
from inkwell.persistence.tables import follow_ups_table


class PostgresFollowUpRepository(FollowUpRepository):
    """PostgreSQL implementation of FollowUpRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_guard
    async def add(self, follow_up: FollowUp) -> bool:
        """Record a follow-up unless its key is taken."""
        stmt = (
            insert(follow_ups_table)
            .values(**follow_up_to_dict(follow_up))
            .on_conflict_do_nothing(index_elements=[follow_ups_table.c.key])
            .returning(follow_ups_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @storage_guard
    async def find_by_key(self, key: str) -> Optional[FollowUp]:
        """Find a follow-up by key."""
        stmt = select(follow_ups_table).where(follow_ups_table.c.key == key)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow_up(row._asdict()) if row else None

    @storage_guard
    async def find_pending(self, limit: int = 100) -> List[FollowUp]:
        """Find pending follow-ups, oldest first.

        Rows are locked for the transaction and rows locked by another
        drainer are skipped.
        """
        stmt = (
            select(follow_ups_table)
            .where(follow_ups_table.c.status == FollowUpStatus.PENDING.value)
            .order_by(follow_ups_table.c.created_at)
            .limit(limit)
            .with_for_update(skip_locked=True)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow_up(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def mark_applied(self, follow_up_id: FollowUpId) -> None:
        """Mark a follow-up as applied."""
        stmt = (
            follow_ups_table.update()
            .where(follow_ups_table.c.id == follow_up_id)
            .values(status=FollowUpStatus.APPLIED.value, applied_at=utcnow())
        )
        await self.session.execute(stmt)

    @storage_guard
    async def record_failure(
        self, follow_up_id: FollowUpId, error: str, max_attempts: int
    ) -> Optional[FollowUp]:
        """Count a failed attempt; fail the follow-up once attempts run out."""
        attempts = follow_ups_table.c.attempts + 1
        stmt = (
            follow_ups_table.update()
            .where(follow_ups_table.c.id == follow_up_id)
            .values(
                attempts=attempts,
                last_error=error,
                status=case(
                    (attempts >= max_attempts, FollowUpStatus.FAILED.value),
                    else_=FollowUpStatus.PENDING.value,
                ),
            )
            .returning(follow_ups_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow_up(row._asdict()) if row else None

    @asynccontextmanager
    async def isolated(self) -> AsyncIterator[None]:
        """Run the block in a savepoint; it rolls back alone on error."""
        async with self.session.begin_nested():
            yield
