"""In-memory notification repository for testing."""

from typing import Optional, Sequence

from inkwell.domain.model.notification import Notification
from inkwell.domain.repository.notification import NotificationRepository
from inkwell.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._notifications = store.notifications

    def _feed(
        self, recipient_id: UserId, type: Optional[NotificationType]
    ) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id
            and n.actor_id != recipient_id
            and (type is None or n.type == type)
        ]

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification; an existing record with the same id is kept."""
        return self._notifications.setdefault(notification.id, notification)

    async def add_like(self, notification: Notification) -> bool:
        """Insert a like record unless the actor already likes the blog."""
        if await self.find_like(notification.actor_id, notification.blog_id):
            return False
        self._notifications[notification.id] = notification
        return True

    async def find_like(self, actor_id: UserId, blog_id: BlogId) -> Optional[Notification]:
        """Find the like record of an actor on a blog."""
        for n in self._notifications.values():
            if (
                n.type == NotificationType.LIKE
                and n.actor_id == actor_id
                and n.blog_id == blog_id
            ):
                return n
        return None

    async def delete_like(self, actor_id: UserId, blog_id: BlogId) -> bool:
        """Delete the like record of an actor on a blog."""
        like = await self.find_like(actor_id, blog_id)
        if like is None:
            return False
        del self._notifications[like.id]
        return True

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every record created for a comment."""
        doomed = [n.id for n in self._notifications.values() if n.comment_id == comment_id]
        for notification_id in doomed:
            del self._notifications[notification_id]
        return len(doomed)

    async def clear_reply(self, reply_id: CommentId) -> int:
        """Unset reply_id on records pointing at the reply."""
        linked = [n for n in self._notifications.values() if n.reply_id == reply_id]
        for n in linked:
            self._notifications[n.id] = n.model_copy(update={"reply_id": None})
        return len(linked)

    async def set_reply(
        self, notification_id: NotificationId, reply_id: CommentId
    ) -> bool:
        """Attach a reply to an existing record."""
        notification = self._notifications.get(notification_id)
        if notification is None:
            return False
        self._notifications[notification_id] = notification.model_copy(
            update={"reply_id": reply_id}
        )
        return True

    async def find_feed(
        self,
        recipient_id: UserId,
        type: Optional[NotificationType] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        feed = sorted(
            self._feed(recipient_id, type),
            key=lambda n: (n.created_at, n.id),
            reverse=True,
        )
        return feed[skip : skip + limit]

    async def count_feed(
        self, recipient_id: UserId, type: Optional[NotificationType] = None
    ) -> int:
        """Count a recipient's notifications."""
        return len(self._feed(recipient_id, type))

    async def mark_seen(self, notification_ids: Sequence[NotificationId]) -> int:
        """Flag records as seen."""
        updated = 0
        for notification_id in notification_ids:
            notification = self._notifications.get(notification_id)
            if notification is not None:
                self._notifications[notification_id] = notification.model_copy(
                    update={"seen": True}
                )
                updated += 1
        return updated

    async def exists_unseen(self, recipient_id: UserId) -> bool:
        """Whether the recipient has an unseen record from someone else."""
        return any(not n.seen for n in self._feed(recipient_id, None))
