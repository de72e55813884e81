"""In-memory repository implementations for testing."""

from .blog import InMemoryBlogRepository
from .comment import InMemoryCommentRepository
from .follow_up import InMemoryFollowUpRepository
from .notification import InMemoryNotificationRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryBlogRepository",
    "InMemoryCommentRepository",
    "InMemoryFollowUpRepository",
    "InMemoryNotificationRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
