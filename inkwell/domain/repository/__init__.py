"""Repository interfaces for the Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from inkwell.domain.repository.blog import BlogRepository
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.repository.follow_up import FollowUpRepository
from inkwell.domain.repository.notification import NotificationRepository
from inkwell.domain.repository.user import UserRepository

__all__ = [
    "BlogRepository",
    "CommentRepository",
    "FollowUpRepository",
    "NotificationRepository",
    "UserRepository",
]
