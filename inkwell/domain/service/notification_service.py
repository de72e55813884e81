"""Notification fan-out domain service."""

from uuid import uuid4

import logfire

from inkwell.domain.model.common import utcnow
from inkwell.domain.model.notification import Notification
from inkwell.domain.repository import NotificationRepository
from inkwell.domain.value import (
    BlogId,
    CommentId,
    NotificationFilter,
    NotificationId,
    NotificationType,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Produces and serves notification records.

    Writes here are side effects of comments, replies and likes. Comment and
    reply writes accept a caller-chosen id so that applying the same follow-up
    twice stores one record.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify_comment(
        self,
        blog_id: BlogId,
        recipient_id: UserId,
        actor_id: UserId,
        comment_id: CommentId,
        notification_id: NotificationId | None = None,
    ) -> Notification:
        """Record that actor commented on recipient's blog.

        Args:
            blog_id: Blog commented on
            recipient_id: Blog author
            actor_id: Commenting user
            comment_id: The new comment
            notification_id: Id to store the record under (generated if None)

        Returns:
            The stored notification
        """
        with logfire.span(
            "notification_service.notify_comment",
            blog_id=str(blog_id),
            comment_id=str(comment_id),
        ):
            notification = Notification(
                id=notification_id or NotificationId(uuid4()),
                type=NotificationType.COMMENT,
                blog_id=blog_id,
                recipient_id=recipient_id,
                actor_id=actor_id,
                comment_id=comment_id,
                created_at=utcnow(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Comment notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
            )
            return saved

    async def notify_reply(
        self,
        blog_id: BlogId,
        recipient_hint: UserId,
        actor_id: UserId,
        comment_id: CommentId,
        parent_comment_id: CommentId,
        parent_author_id: UserId,
        update_notification_id: NotificationId | None = None,
        notification_id: NotificationId | None = None,
    ) -> Notification:
        """Record that actor replied to a comment.

        The recipient is the author of the parent comment, not the blog
        author. When update_notification_id names the notification the reply
        was written from, that record also gets reply_id set.

        Args:
            blog_id: Blog the thread belongs to
            recipient_hint: Blog author as sent by the client (not used as recipient)
            actor_id: Replying user
            comment_id: The new reply
            parent_comment_id: Comment replied to
            parent_author_id: Author of the parent comment
            update_notification_id: In-flight notification to attach the reply to
            notification_id: Id to store the record under (generated if None)

        Returns:
            The stored reply notification
        """
        with logfire.span(
            "notification_service.notify_reply",
            blog_id=str(blog_id),
            comment_id=str(comment_id),
            parent_comment_id=str(parent_comment_id),
        ):
            notification = Notification(
                id=notification_id or NotificationId(uuid4()),
                type=NotificationType.REPLY,
                blog_id=blog_id,
                recipient_id=parent_author_id,
                actor_id=actor_id,
                comment_id=comment_id,
                replied_on_comment_id=parent_comment_id,
                created_at=utcnow(),
            )
            saved = await self.notification_repository.save(notification)

            if update_notification_id is not None:
                attached = await self.notification_repository.set_reply(
                    update_notification_id, comment_id
                )
                if not attached:
                    logfire.warn(
                        "In-flight notification not found",
                        notification_id=str(update_notification_id),
                    )

            logfire.info(
                "Reply notification created",
                notification_id=str(saved.id),
                recipient_id=str(parent_author_id),
                blog_author_id=str(recipient_hint),
            )
            return saved

    async def notify_like(
        self, blog_id: BlogId, recipient_id: UserId, actor_id: UserId
    ) -> bool:
        """Record a like.

        Returns:
            True if a like was recorded, False if the actor already liked the blog
        """
        with logfire.span(
            "notification_service.notify_like",
            blog_id=str(blog_id),
            actor_id=str(actor_id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                type=NotificationType.LIKE,
                blog_id=blog_id,
                recipient_id=recipient_id,
                actor_id=actor_id,
                created_at=utcnow(),
            )
            added = await self.notification_repository.add_like(notification)
            if added:
                logfire.info("Like recorded", blog_id=str(blog_id))
            else:
                logfire.info("Like already present", blog_id=str(blog_id))
            return added

    async def retract_like(self, blog_id: BlogId, actor_id: UserId) -> bool:
        """Remove a like.

        Returns:
            True if a like was removed, False if there was none
        """
        with logfire.span(
            "notification_service.retract_like",
            blog_id=str(blog_id),
            actor_id=str(actor_id),
        ):
            removed = await self.notification_repository.delete_like(actor_id, blog_id)
            logfire.info("Like retracted", blog_id=str(blog_id), removed=removed)
            return removed

    async def is_liked(self, blog_id: BlogId, actor_id: UserId) -> bool:
        """Whether actor currently likes the blog."""
        return (
            await self.notification_repository.find_like(actor_id, blog_id)
        ) is not None

    async def delete_for_comment(self, comment_id: CommentId) -> tuple[int, int]:
        """Clean up notifications of a removed comment.

        Records created for the comment are deleted. Records that point at it
        as the reply written from them keep existing with reply_id unset.

        Returns:
            (deleted records, unlinked records)
        """
        with logfire.span(
            "notification_service.delete_for_comment", comment_id=str(comment_id)
        ):
            deleted = await self.notification_repository.delete_by_comment(comment_id)
            cleared = await self.notification_repository.clear_reply(comment_id)
            logfire.info(
                "Comment notifications cleaned up",
                comment_id=str(comment_id),
                deleted=deleted,
                cleared=cleared,
            )
            return deleted, cleared

    async def list_feed(
        self,
        recipient_id: UserId,
        filter_type: NotificationFilter = NotificationFilter.ALL,
        skip: int = 0,
        limit: int = 10,
    ) -> list[Notification]:
        """Fetch a page of the recipient's feed and mark it seen.

        Records are returned as they were before this read, so callers can
        still tell which ones are new.

        Args:
            recipient_id: Whose feed
            filter_type: Restrict to one notification type
            skip: Records to skip
            limit: Page size

        Returns:
            Page of notifications, newest first, excluding self-notifications
        """
        with logfire.span(
            "notification_service.list_feed",
            recipient_id=str(recipient_id),
            filter=filter_type.value,
            skip=skip,
            limit=limit,
        ):
            page = await self.notification_repository.find_feed(
                recipient_id,
                type=filter_type.as_type(),
                skip=max(skip, 0),
                limit=limit,
            )
            unseen = [n.id for n in page if not n.seen]
            if unseen:
                await self.notification_repository.mark_seen(unseen)
            logfire.info(
                "Notification feed read",
                recipient_id=str(recipient_id),
                count=len(page),
                marked_seen=len(unseen),
            )
            return page

    async def count_feed(
        self,
        recipient_id: UserId,
        filter_type: NotificationFilter = NotificationFilter.ALL,
    ) -> int:
        """Count the recipient's feed with the same exclusions as list_feed."""
        return await self.notification_repository.count_feed(
            recipient_id, type=filter_type.as_type()
        )

    async def has_unseen(self, recipient_id: UserId) -> bool:
        """Whether the recipient has anything new from someone else."""
        with logfire.span(
            "notification_service.has_unseen", recipient_id=str(recipient_id)
        ):
            return await self.notification_repository.exists_unseen(recipient_id)
