"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import CounterField, UserId
from inkwell.domain.value.types import Username
from inkwell.persistence.database import storage_guard
from inkwell.persistence.mappers import row_to_user, user_to_dict
from inkwell.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_guard
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @storage_guard
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find multiple users by IDs (batch query)."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @storage_guard
    async def search_by_username(self, query: str, limit: int = 50) -> List[User]:
        """Find users whose username contains the query (case-insensitive)."""
        escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        stmt = (
            select(users_table)
            .where(users_table.c.username.ilike(f"%{escaped}%", escape="\\"))
            .order_by(users_table.c.username)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def save(self, user: User) -> User:
        """Save a user (create or update). Counters are left untouched on update."""
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)

        if existing:
            values = {
                k: v
                for k, v in user_dict.items()
                if k not in ("total_posts", "total_reads")
            }
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**values)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(user.id) or user

    @storage_guard
    async def apply_delta(self, user_id: UserId, field: CounterField, delta: int) -> bool:
        """Atomically add a delta to a counter column (floored at 0)."""
        column = users_table.c[field.value]
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values({column: func.greatest(column + delta, 0)})
            .returning(users_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None
