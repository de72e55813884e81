"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject, ValueObject


class NotificationType(str, Enum):
    """Kind of event a notification records."""

    LIKE = "like"
    COMMENT = "comment"
    REPLY = "reply"


class NotificationFilter(str, Enum):
    """Feed filter. ALL matches every notification type."""

    ALL = "all"
    LIKE = "like"
    COMMENT = "comment"
    REPLY = "reply"

    def as_type(self) -> NotificationType | None:
        """Notification type to filter on, or None for every type."""
        if self is NotificationFilter.ALL:
            return None
        return NotificationType(self.value)


class EntityKind(str, Enum):
    """Entities that carry ledger counters."""

    BLOG = "blog"
    USER = "user"


class CounterField(str, Enum):
    """Derived counters maintained by signed deltas."""

    TOTAL_COMMENTS = "total_comments"
    TOTAL_PARENT_COMMENTS = "total_parent_comments"
    TOTAL_POSTS = "total_posts"
    TOTAL_READS = "total_reads"
    TOTAL_LIKES = "total_likes"


# Which counters each entity kind owns
COUNTER_OWNERSHIP: dict[EntityKind, frozenset[CounterField]] = {
    EntityKind.BLOG: frozenset(
        {
            CounterField.TOTAL_COMMENTS,
            CounterField.TOTAL_PARENT_COMMENTS,
            CounterField.TOTAL_READS,
            CounterField.TOTAL_LIKES,
        }
    ),
    EntityKind.USER: frozenset({CounterField.TOTAL_POSTS, CounterField.TOTAL_READS}),
}


class EntityRef(ValueObject):
    """Reference to a counter-carrying entity (a blog or a user)."""

    kind: EntityKind
    id: UUID

    @classmethod
    def blog(cls, blog_id: UUID) -> "EntityRef":
        return cls(kind=EntityKind.BLOG, id=blog_id)

    @classmethod
    def user(cls, user_id: UUID) -> "EntityRef":
        return cls(kind=EntityKind.USER, id=user_id)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


class FollowUpKind(str, Enum):
    """Side effects that run after a primary write."""

    APPLY_DELTA = "apply_delta"
    NOTIFY_COMMENT = "notify_comment"
    NOTIFY_REPLY = "notify_reply"
    RETRACT_COMMENT_NOTIFICATIONS = "retract_comment_notifications"


class FollowUpStatus(str, Enum):
    """Lifecycle of a recorded follow-up."""

    PENDING = "pending"
    APPLIED = "applied"
    FAILED = "failed"


class BlogMode(str, Enum):
    """How a blog is being opened. Edit-mode opens do not count as reads."""

    READ = "read"
    EDIT = "edit"


class Username(RootValueObject[str]):
    """Public username of an account."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Username must be 1-64 characters")
        return v


class TagName(RootValueObject[str]):
    """Blog tag. Stored lowercase."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Normalize to lowercase and validate length."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag must be 1-50 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for blogs.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'my-first-post', 'notes-on-async-python-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
