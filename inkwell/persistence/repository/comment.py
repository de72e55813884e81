"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import bindparam, desc, func, select
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import BlogId, CommentId
from inkwell.persistence.database import storage_guard
from inkwell.persistence.mappers import comment_to_dict, row_to_comment
from inkwell.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _newest_first(stmt):
        return stmt.order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))

    @storage_guard
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @storage_guard
    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID with a row lock (SELECT ... FOR UPDATE)."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @storage_guard
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(list(comment_ids)))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def find_top_level(
        self, blog_id: BlogId, skip: int = 0, limit: int = 5
    ) -> List[Comment]:
        """Find top-level comments of a blog, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.blog_id == blog_id)
            .where(comments_table.c.is_reply.is_(False))
        )
        stmt = self._newest_first(stmt).offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def find_replies(
        self, parent_id: CommentId, skip: int = 0, limit: int = 5
    ) -> List[Comment]:
        """Find direct replies to a comment, newest first."""
        stmt = select(comments_table).where(
            comments_table.c.parent_comment_id == parent_id
        )
        stmt = self._newest_first(stmt).offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find every direct child of a comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id == parent_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    @storage_guard
    async def append_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Append a child id to the parent's child_ids in place."""
        child = bindparam("child_id", child_id, type_=PG_UUID(as_uuid=True))
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == parent_id)
            .values(
                child_ids=func.array_append(
                    comments_table.c.child_ids,
                    child,
                    type_=comments_table.c.child_ids.type,
                )
            )
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @storage_guard
    async def remove_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Remove a child id from the parent's child_ids in place."""
        child = bindparam("child_id", child_id, type_=PG_UUID(as_uuid=True))
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == parent_id)
            .values(
                child_ids=func.array_remove(
                    comments_table.c.child_ids,
                    child,
                    type_=comments_table.c.child_ids.type,
                )
            )
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @storage_guard
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete a set of comments."""
        if not comment_ids:
            return 0
        stmt = comments_table.delete().where(comments_table.c.id.in_(list(comment_ids)))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    @storage_guard
    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count comments of a blog."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.blog_id == blog_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
