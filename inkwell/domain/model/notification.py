"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class Notification(DomainModel):
    """Notification record.

    Produced as a side effect of likes, comments and replies:
    - like: actor liked recipient's blog (one per actor and blog)
    - comment: actor commented on recipient's blog (comment_id set)
    - reply: actor replied to recipient's comment (comment_id is the reply,
      replied_on_comment_id is the comment replied to)

    reply_id is set on a record when its recipient answered from it; it is
    cleared, not deleted, when that reply goes away.
    """

    id: NotificationId
    type: NotificationType
    blog_id: BlogId
    recipient_id: UserId
    actor_id: UserId
    comment_id: Optional[CommentId] = None
    replied_on_comment_id: Optional[CommentId] = None
    reply_id: Optional[CommentId] = None
    seen: bool = False
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def is_self_notification(self) -> bool:
        """True when the actor would be notified about their own action."""
        return self.actor_id == self.recipient_id
