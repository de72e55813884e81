"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.notification import Notification
from inkwell.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class NotificationRepository(ABC):
    """Repository for Notification records."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a comment or reply notification."""
        pass

    @abstractmethod
    async def add_like(self, notification: Notification) -> bool:
        """Insert a like record unless the actor already likes the blog.

        Returns:
            True if inserted, False if a like record already existed
        """
        pass

    @abstractmethod
    async def find_like(self, actor_id: UserId, blog_id: BlogId) -> Optional[Notification]:
        """Find the like record of an actor on a blog."""
        pass

    @abstractmethod
    async def delete_like(self, actor_id: UserId, blog_id: BlogId) -> bool:
        """Delete the like record of an actor on a blog.

        Returns:
            True if a record was deleted
        """
        pass

    @abstractmethod
    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every record whose comment_id is the given comment.

        Returns:
            Number of records deleted
        """
        pass

    @abstractmethod
    async def clear_reply(self, reply_id: CommentId) -> int:
        """Unset reply_id on every record pointing at the given reply.

        Returns:
            Number of records updated
        """
        pass

    @abstractmethod
    async def set_reply(
        self, notification_id: NotificationId, reply_id: CommentId
    ) -> bool:
        """Attach a reply to an existing record.

        Returns:
            True if the record existed and was updated
        """
        pass

    @abstractmethod
    async def find_feed(
        self,
        recipient_id: UserId,
        type: Optional[NotificationType] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first.

        Records where the actor is the recipient are never returned.

        Args:
            recipient_id: Who is notified
            type: Restrict to one notification type (None for all)
            skip: Number of records to skip
            limit: Maximum number of records to return
        """
        pass

    @abstractmethod
    async def count_feed(
        self, recipient_id: UserId, type: Optional[NotificationType] = None
    ) -> int:
        """Count a recipient's notifications, with the same exclusions as find_feed."""
        pass

    @abstractmethod
    async def mark_seen(self, notification_ids: Sequence[NotificationId]) -> int:
        """Flag records as seen.

        Returns:
            Number of records updated
        """
        pass

    @abstractmethod
    async def exists_unseen(self, recipient_id: UserId) -> bool:
        """Whether the recipient has an unseen record from someone else."""
        pass
