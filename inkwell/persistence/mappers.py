"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from inkwell.domain.model import Blog, Comment, FollowUp, Notification, User
from inkwell.domain.value import (
    BlogId,
    CommentId,
    FollowUpId,
    FollowUpKind,
    FollowUpStatus,
    NotificationId,
    NotificationType,
    Slug,
    TagName,
    UserId,
)
from inkwell.domain.value.types import Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        fullname=row["fullname"],
        email=row.get("email"),
        profile_img=row.get("profile_img"),
        bio=row.get("bio"),
        total_posts=row["total_posts"],
        total_reads=row["total_reads"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model.

    Args:
        row: Database row as dict

    Returns:
        Blog domain model
    """
    return Blog(
        id=BlogId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row["description"],
        banner_url=row.get("banner_url"),
        content=row["content"],
        tags=[TagName(tag) for tag in row["tags"] or []],
        author_id=UserId(_uuid(row["author_id"])),
        draft=row["draft"],
        published_at=row.get("published_at"),
        total_likes=row["total_likes"],
        total_comments=row["total_comments"],
        total_reads=row["total_reads"],
        total_parent_comments=row["total_parent_comments"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict.

    Value objects (slug, tags) dump to their primitive values.
    """
    return blog.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_comment_id = _optional_uuid(row.get("parent_comment_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_id=BlogId(_uuid(row["blog_id"])),
        blog_author_id=UserId(_uuid(row["blog_author_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        parent_comment_id=CommentId(parent_comment_id) if parent_comment_id else None,
        is_reply=row["is_reply"],
        child_ids=[CommentId(_uuid(cid)) for cid in row["child_ids"] or []],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        blog_id=BlogId(_uuid(row["blog_id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        actor_id=UserId(_uuid(row["actor_id"])),
        comment_id=_optional_uuid(row.get("comment_id")),
        replied_on_comment_id=_optional_uuid(row.get("replied_on_comment_id")),
        reply_id=_optional_uuid(row.get("reply_id")),
        seen=row["seen"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data


def row_to_follow_up(row: Dict[str, Any]) -> FollowUp:
    """Convert database row to FollowUp domain model."""
    return FollowUp(
        id=FollowUpId(_uuid(row["id"])),
        key=row["key"],
        kind=FollowUpKind(row["kind"]),
        payload=row["payload"] or {},
        status=FollowUpStatus(row["status"]),
        attempts=row["attempts"],
        last_error=row.get("last_error"),
        created_at=row["created_at"],
        applied_at=row.get("applied_at"),
    )


def follow_up_to_dict(follow_up: FollowUp) -> Dict[str, Any]:
    """Convert FollowUp domain model to database dict."""
    data = follow_up.model_dump()
    data["kind"] = follow_up.kind.value
    data["status"] = follow_up.status.value
    return data
