"""Follow-up (outbox) domain service.

Side effects of a primary write (counter deltas, notification writes and
notification cleanup) are recorded as FollowUp rows in the same transaction
as the write, then applied one by one. Each row carries a unique key, so
recording the same effect twice stores it once, and applying it happens inside
an isolated scope together with marking it applied.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable
from uuid import UUID, uuid4

import logfire

from inkwell.config import FollowUpSettings
from inkwell.domain.model.comment import Comment
from inkwell.domain.model.common import utcnow
from inkwell.domain.model.follow_up import FollowUp
from inkwell.domain.repository import FollowUpRepository
from inkwell.domain.value import (
    BlogId,
    CommentId,
    CounterField,
    EntityKind,
    EntityRef,
    FollowUpId,
    FollowUpKind,
    NotificationId,
    UserId,
)

from .base import Service
from .ledger_service import LedgerService
from .notification_service import NotificationService


@dataclass
class DrainReport:
    """Counts from one dispatch or drain pass."""

    applied: int = 0
    retrying: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.applied + self.retrying + self.failed

    def merge(self, other: "DrainReport") -> "DrainReport":
        return DrainReport(
            applied=self.applied + other.applied,
            retrying=self.retrying + other.retrying,
            failed=self.failed + other.failed,
        )


def delta_follow_up(
    key: str, entity: EntityRef, field: CounterField, delta: int
) -> FollowUp:
    """Build a counter delta follow-up."""
    return FollowUp(
        id=FollowUpId(uuid4()),
        key=key,
        kind=FollowUpKind.APPLY_DELTA,
        payload={
            "entity_kind": entity.kind.value,
            "entity_id": str(entity.id),
            "field": field.value,
            "delta": delta,
        },
        created_at=utcnow(),
    )


def comment_created_follow_ups(
    comment: Comment,
    parent: Comment | None = None,
    update_notification_id: NotificationId | None = None,
) -> list[FollowUp]:
    """Follow-ups owed after a comment or reply is stored.

    Top-level comments move total_comments and total_parent_comments on the
    blog and notify the blog author. Replies move total_comments only and
    notify the parent comment's author.

    Args:
        comment: The stored comment
        parent: Parent comment when the comment is a reply
        update_notification_id: In-flight notification the reply was written from
    """
    blog = EntityRef.blog(comment.blog_id)
    prefix = f"{comment.id}:created"
    follow_ups = [
        delta_follow_up(
            f"{prefix}:blog.total_comments", blog, CounterField.TOTAL_COMMENTS, 1
        )
    ]

    if parent is None:
        follow_ups.append(
            delta_follow_up(
                f"{prefix}:blog.total_parent_comments",
                blog,
                CounterField.TOTAL_PARENT_COMMENTS,
                1,
            )
        )
        follow_ups.append(
            FollowUp(
                id=FollowUpId(uuid4()),
                key=f"{prefix}:notify",
                kind=FollowUpKind.NOTIFY_COMMENT,
                payload={
                    "notification_id": str(uuid4()),
                    "blog_id": str(comment.blog_id),
                    "recipient_id": str(comment.blog_author_id),
                    "actor_id": str(comment.author_id),
                    "comment_id": str(comment.id),
                },
                created_at=utcnow(),
            )
        )
    else:
        follow_ups.append(
            FollowUp(
                id=FollowUpId(uuid4()),
                key=f"{prefix}:notify",
                kind=FollowUpKind.NOTIFY_REPLY,
                payload={
                    "notification_id": str(uuid4()),
                    "blog_id": str(comment.blog_id),
                    "recipient_hint": str(comment.blog_author_id),
                    "actor_id": str(comment.author_id),
                    "comment_id": str(comment.id),
                    "parent_comment_id": str(parent.id),
                    "parent_author_id": str(parent.author_id),
                    "update_notification_id": (
                        str(update_notification_id) if update_notification_id else None
                    ),
                },
                created_at=utcnow(),
            )
        )
    return follow_ups


def comment_deleted_follow_ups(comment: Comment) -> list[FollowUp]:
    """Follow-ups owed after a comment is removed: the inverse of creation."""
    blog = EntityRef.blog(comment.blog_id)
    prefix = f"{comment.id}:deleted"
    follow_ups = [
        FollowUp(
            id=FollowUpId(uuid4()),
            key=f"{prefix}:notifications",
            kind=FollowUpKind.RETRACT_COMMENT_NOTIFICATIONS,
            payload={"comment_id": str(comment.id)},
            created_at=utcnow(),
        ),
        delta_follow_up(
            f"{prefix}:blog.total_comments", blog, CounterField.TOTAL_COMMENTS, -1
        ),
    ]
    if not comment.is_reply:
        follow_ups.append(
            delta_follow_up(
                f"{prefix}:blog.total_parent_comments",
                blog,
                CounterField.TOTAL_PARENT_COMMENTS,
                -1,
            )
        )
    return follow_ups


class FollowUpService(Service):
    """Records and applies follow-ups."""

    def __init__(
        self,
        follow_up_repository: FollowUpRepository,
        ledger_service: LedgerService,
        notification_service: NotificationService,
        settings: FollowUpSettings,
    ) -> None:
        """Initialize follow-up service.

        Args:
            follow_up_repository: Follow-up repository
            ledger_service: Counter ledger
            notification_service: Notification fan-out
            settings: Retry settings
        """
        self.follow_up_repository = follow_up_repository
        self.ledger_service = ledger_service
        self.notification_service = notification_service
        self.settings = settings
        self._handlers: dict[FollowUpKind, Callable[[dict[str, Any]], Awaitable[None]]] = {
            FollowUpKind.APPLY_DELTA: self._apply_delta,
            FollowUpKind.NOTIFY_COMMENT: self._notify_comment,
            FollowUpKind.NOTIFY_REPLY: self._notify_reply,
            FollowUpKind.RETRACT_COMMENT_NOTIFICATIONS: self._retract_comment_notifications,
        }

    async def record(self, follow_ups: list[FollowUp]) -> list[FollowUp]:
        """Persist follow-ups next to the primary write.

        Follow-ups whose key is already recorded are skipped.

        Returns:
            The follow-ups that were newly recorded
        """
        with logfire.span("follow_up_service.record", count=len(follow_ups)):
            recorded = []
            for follow_up in follow_ups:
                if await self.follow_up_repository.add(follow_up):
                    recorded.append(follow_up)
                else:
                    logfire.debug("Follow-up already recorded", key=follow_up.key)
            return recorded

    async def dispatch(self, follow_ups: list[FollowUp]) -> DrainReport:
        """Apply follow-ups one by one.

        A failing follow-up is logged and left pending (or marked failed once
        it has used up its attempts); it never stops the others and its error
        is not raised.

        Args:
            follow_ups: Follow-ups to apply

        Returns:
            Counts of applied, retrying and failed follow-ups
        """
        report = DrainReport()
        with logfire.span("follow_up_service.dispatch", count=len(follow_ups)):
            for follow_up in follow_ups:
                if not follow_up.is_pending:
                    continue
                try:
                    async with self.follow_up_repository.isolated():
                        await self._handlers[follow_up.kind](follow_up.payload)
                        await self.follow_up_repository.mark_applied(follow_up.id)
                except Exception as e:
                    updated = await self.follow_up_repository.record_failure(
                        follow_up.id, str(e), self.settings.max_attempts
                    )
                    attempts = updated.attempts if updated else follow_up.attempts + 1
                    logfire.error(
                        "Follow-up failed",
                        key=follow_up.key,
                        kind=follow_up.kind.value,
                        attempts=attempts,
                        error=str(e),
                    )
                    if updated is not None and not updated.is_pending:
                        report.failed += 1
                    else:
                        report.retrying += 1
                else:
                    report.applied += 1

            logfire.info(
                "Follow-ups dispatched",
                applied=report.applied,
                retrying=report.retrying,
                failed=report.failed,
            )
        return report

    async def record_and_dispatch(self, follow_ups: list[FollowUp]) -> DrainReport:
        """Record follow-ups, then apply the ones newly recorded."""
        recorded = await self.record(follow_ups)
        return await self.dispatch(recorded)

    async def drain(self, limit: int | None = None) -> DrainReport:
        """Apply pending follow-ups, oldest first.

        Args:
            limit: Maximum number to load (defaults to the configured batch size)
        """
        limit = limit or self.settings.drain_batch_size
        with logfire.span("follow_up_service.drain", limit=limit):
            pending = await self.follow_up_repository.find_pending(limit=limit)
            if not pending:
                logfire.info("No pending follow-ups")
                return DrainReport()
            return await self.dispatch(pending)

    async def _apply_delta(self, payload: dict[str, Any]) -> None:
        entity = EntityRef(
            kind=EntityKind(payload["entity_kind"]), id=UUID(payload["entity_id"])
        )
        await self.ledger_service.apply_delta(
            entity, CounterField(payload["field"]), int(payload["delta"])
        )

    async def _notify_comment(self, payload: dict[str, Any]) -> None:
        await self.notification_service.notify_comment(
            blog_id=BlogId(UUID(payload["blog_id"])),
            recipient_id=UserId(UUID(payload["recipient_id"])),
            actor_id=UserId(UUID(payload["actor_id"])),
            comment_id=CommentId(UUID(payload["comment_id"])),
            notification_id=NotificationId(UUID(payload["notification_id"])),
        )

    async def _notify_reply(self, payload: dict[str, Any]) -> None:
        update_id = payload.get("update_notification_id")
        await self.notification_service.notify_reply(
            blog_id=BlogId(UUID(payload["blog_id"])),
            recipient_hint=UserId(UUID(payload["recipient_hint"])),
            actor_id=UserId(UUID(payload["actor_id"])),
            comment_id=CommentId(UUID(payload["comment_id"])),
            parent_comment_id=CommentId(UUID(payload["parent_comment_id"])),
            parent_author_id=UserId(UUID(payload["parent_author_id"])),
            update_notification_id=NotificationId(UUID(update_id)) if update_id else None,
            notification_id=NotificationId(UUID(payload["notification_id"])),
        )

    async def _retract_comment_notifications(self, payload: dict[str, Any]) -> None:
        await self.notification_service.delete_for_comment(
            CommentId(UUID(payload["comment_id"]))
        )
