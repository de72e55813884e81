"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, exists, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Notification
from inkwell.domain.repository import NotificationRepository
from inkwell.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)
from inkwell.persistence.database import storage_guard
from inkwell.persistence.mappers import notification_to_dict, row_to_notification
from inkwell.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _feed_filter(stmt, recipient_id: UserId, type: Optional[NotificationType]):
        stmt = stmt.where(notifications_table.c.recipient_id == recipient_id).where(
            notifications_table.c.actor_id != recipient_id
        )
        if type is not None:
            stmt = stmt.where(notifications_table.c.type == type.value)
        return stmt

    @storage_guard
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        result = await self.session.execute(select(notifications_table).where(notifications_table.c.id == notification_id))
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    @storage_guard
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification; an existing record with the same id is kept."""
        stmt = (
            insert(notifications_table)
            .values(**notification_to_dict(notification))
            .on_conflict_do_nothing(index_elements=[notifications_table.c.id])
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(notification.id) or notification

    @storage_guard
    async def add_like(self, notification: Notification) -> bool:
        """Insert a like record unless the actor already likes the blog."""
        stmt = (
            insert(notifications_table)
            .values(**notification_to_dict(notification))
            .on_conflict_do_nothing(
                index_elements=[notifications_table.c.actor_id, notifications_table.c.blog_id],
                index_where=notifications_table.c.type == NotificationType.LIKE.value,
            )
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @storage_guard
    async def find_like(self, actor_id: UserId, blog_id: BlogId) -> Optional[Notification]:
        """Find the like record of an actor on a blog."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.actor_id == actor_id)
            .where(notifications_table.c.blog_id == blog_id)
            .where(notifications_table.c.type == NotificationType.LIKE.value)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    @storage_guard
    async def delete_like(self, actor_id: UserId, blog_id: BlogId) -> bool:
        """Delete the like record of an actor on a blog."""
        stmt = (
            notifications_table.delete()
            .where(notifications_table.c.actor_id == actor_id)
            .where(notifications_table.c.blog_id == blog_id)
            .where(notifications_table.c.type == NotificationType.LIKE.value)
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @storage_guard
    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every record created for a comment."""
        result = await self.session.execute(
            notifications_table.delete().where(notifications_table.c.comment_id == comment_id)
        )
        return result.rowcount or 0

    @storage_guard
    async def clear_reply(self, reply_id: CommentId) -> int:
        """Unset reply_id on records pointing at the reply."""
        result = await self.session.execute(
            notifications_table.update().where(notifications_table.c.reply_id == reply_id).values(reply_id=None)
        )
        return result.rowcount or 0

    @storage_guard
    async def set_reply(
        self, notification_id: NotificationId, reply_id: CommentId
    ) -> bool:
        """Attach a reply to an existing record."""
        stmt = (
            notifications_table.update()
            .where(notifications_table.c.id == notification_id)
            .values(reply_id=reply_id)
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @storage_guard
    async def find_feed(
        self,
        recipient_id: UserId,
        type: Optional[NotificationType] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        stmt = self._feed_filter(select(notifications_table), recipient_id, type)
        stmt = stmt.order_by(desc(notifications_table.c.created_at), desc(notifications_table.c.id)).offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def count_feed(
        self, recipient_id: UserId, type: Optional[NotificationType] = None
    ) -> int:
        """Count a recipient's notifications."""
        stmt = self._feed_filter(select(func.count()).select_from(notifications_table), recipient_id, type)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @storage_guard
    async def mark_seen(self, notification_ids: Sequence[NotificationId]) -> int:
        """Flag records as seen."""
        if not notification_ids:
            return 0
        result = await self.session.execute(
            notifications_table.update().where(notifications_table.c.id.in_(list(notification_ids))).values(seen=True)
        )
        return result.rowcount or 0

    @storage_guard
    async def exists_unseen(self, recipient_id: UserId) -> bool:
        """Whether the recipient has an unseen record from someone else."""
        condition = (
            exists()
            .where(notifications_table.c.recipient_id == recipient_id)
            .where(notifications_table.c.actor_id != recipient_id)
            .where(notifications_table.c.seen.is_(False))
        )
        result = await self.session.execute(select(condition))
        return bool(result.scalar())
