"""Domain services."""

from .base import Service
from .blog_service import BlogService
from .comment_service import CascadeDeletion, CommentService
from .follow_up_service import (
    DrainReport,
    FollowUpService,
    comment_created_follow_ups,
    comment_deleted_follow_ups,
    delta_follow_up,
)
from .jwt_service import JWTService
from .ledger_service import LedgerService
from .notification_service import NotificationService
from .user_service import UserService

__all__ = [
    "BlogService",
    "CascadeDeletion",
    "CommentService",
    "DrainReport",
    "FollowUpService",
    "JWTService",
    "LedgerService",
    "NotificationService",
    "Service",
    "UserService",
    "comment_created_follow_ups",
    "comment_deleted_follow_ups",
    "delta_follow_up",
]
