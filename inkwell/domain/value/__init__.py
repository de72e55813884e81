"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import (
    BlogId,
    CommentId,
    FollowUpId,
    NotificationId,
    UserId,
)
from inkwell.domain.value.types import (
    COUNTER_OWNERSHIP,
    BlogMode,
    CounterField,
    EntityKind,
    EntityRef,
    FollowUpKind,
    FollowUpStatus,
    NotificationFilter,
    NotificationType,
    Slug,
    TagName,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "CommentId",
    "NotificationId",
    "FollowUpId",
    # Types
    "COUNTER_OWNERSHIP",
    "BlogMode",
    "CounterField",
    "EntityKind",
    "EntityRef",
    "FollowUpKind",
    "FollowUpStatus",
    "NotificationFilter",
    "NotificationType",
    "Slug",
    "TagName",
    "Username",
]
