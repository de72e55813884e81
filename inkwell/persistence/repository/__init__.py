"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.blog import PostgresBlogRepository
from inkwell.persistence.repository.comment import PostgresCommentRepository
from inkwell.persistence.repository.follow_up import PostgresFollowUpRepository
from inkwell.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from inkwell.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresBlogRepository",
    "PostgresCommentRepository",
    "PostgresFollowUpRepository",
    "PostgresNotificationRepository",
    "PostgresUserRepository",
]
