"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from inkwell.domain.model import Blog, Comment, User
from inkwell.domain.value import (
    BlogId,
    CommentId,
    Slug,
    TagName,
    UserId,
    Username,
)

# Keep test output local and quiet
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Deterministic timestamp, `minutes` after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str = "writer", **overrides) -> User:
    """Build a user with sensible defaults."""
    fields = {
        "id": UserId(uuid4()),
        "username": Username(username),
        "fullname": username.title(),
        "profile_img": f"https://img.example/{username}.png",
    }
    fields.update(overrides)
    return User(**fields)


def make_blog(author_id: UserId, title: str = "Test Blog", **overrides) -> Blog:
    """Build a published blog with sensible defaults."""
    blog_id = overrides.pop("id", None) or BlogId(uuid4())
    fields = {
        "id": blog_id,
        "slug": Slug(f"test-blog-{blog_id.hex[:8]}"),
        "title": title,
        "description": "A blog used in tests",
        "banner_url": "https://img.example/banner.png",
        "content": {"blocks": [{"type": "paragraph", "data": {"text": "hello"}}]},
        "tags": [TagName("python")],
        "author_id": author_id,
        "draft": False,
        "published_at": BASE_TIME,
    }
    fields.update(overrides)
    return Blog(**fields)


def make_comment(
    blog: Blog,
    author_id: UserId,
    body: str = "A comment",
    parent: Comment | None = None,
    **overrides,
) -> Comment:
    """Build a comment (or a reply when parent is given)."""
    fields = {
        "id": CommentId(uuid4()),
        "blog_id": blog.id,
        "blog_author_id": blog.author_id,
        "author_id": author_id,
        "body": body,
        "parent_comment_id": parent.id if parent else None,
        "is_reply": parent is not None,
    }
    fields.update(overrides)
    return Comment(**fields)
