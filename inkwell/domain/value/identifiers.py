"""Strongly typed identifiers for Inkwell domain entities.

Identifiers are opaque: the core only compares them and passes them to the
stores that own the referenced entity.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
BlogId = NewType("BlogId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
FollowUpId = NewType("FollowUpId", UUID)
