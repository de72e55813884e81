"""Domain model entities for Inkwell."""

from inkwell.domain.model.blog import Blog
from inkwell.domain.model.comment import Comment
from inkwell.domain.model.follow_up import FollowUp
from inkwell.domain.model.notification import Notification
from inkwell.domain.model.user import User

__all__ = [
    "Blog",
    "Comment",
    "FollowUp",
    "Notification",
    "User",
]
