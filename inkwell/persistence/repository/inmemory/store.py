"""Shared state behind the in-memory repositories."""

from dataclasses import dataclass, field, fields

from inkwell.domain.model import Blog, Comment, FollowUp, Notification, User
from inkwell.domain.value import BlogId, CommentId, FollowUpId, NotificationId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory backend.

    One store is shared by every repository of a container, so writes made
    through one repository are visible through the others, as with a
    database.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    blogs: dict[BlogId, Blog] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    notifications: dict[NotificationId, Notification] = field(default_factory=dict)
    follow_ups: dict[FollowUpId, FollowUp] = field(default_factory=dict)

    def snapshot(self) -> dict[str, dict]:
        """Copy every table. Models are frozen, so shallow copies suffice."""
        return {f.name: dict(getattr(self, f.name)) for f in fields(self)}

    def restore(self, snapshot: dict[str, dict]) -> None:
        """Put back tables captured by snapshot()."""
        for name, table in snapshot.items():
            getattr(self, name).clear()
            getattr(self, name).update(table)
