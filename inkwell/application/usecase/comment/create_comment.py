"""Create comment use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.service import (
    BlogService,
    CommentService,
    FollowUpService,
    comment_created_follow_ups,
)
from inkwell.domain.value import BlogId, CommentId, NotificationId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    blog_id: str  # UUID string
    body: str
    author_id: str  # User ID from authenticated user
    blog_author_id: str | None = None  # As known to the client; checked if sent
    parent_comment_id: str | None = None  # Parent comment ID for replies
    notification_id: str | None = None  # Notification the reply is written from


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    blog_id: str
    author_id: str
    body: str
    parent_comment_id: str | None
    is_reply: bool
    child_ids: list[str]
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a blog or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        follow_up_service: FollowUpService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
            follow_up_service: Follow-up domain service
        """
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.follow_up_service = follow_up_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate: blog is published, blog author matches, body not empty
        2. Persist the node (and link it under its parent for replies)
        3. Record counter and notification follow-ups
        4. Apply follow-ups; their failures are logged, never raised

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the blog is missing or a draft, or the parent is missing
            ValidationError: If the body is empty or the blog author does not match
        """
        blog_id = BlogId(UUID(request.blog_id))
        author_id = UserId(UUID(request.author_id))

        with logfire.span(
            "create_comment.execute",
            blog_id=request.blog_id,
            author_id=request.author_id,
            is_reply=request.parent_comment_id is not None,
        ):
            blog = await self.blog_service.get_published(blog_id)
            if (
                request.blog_author_id
                and _parse_id(request.blog_author_id, "blog_author_id") != blog.author_id
            ):
                raise ValidationError("blog_author_id does not match the blog's author")

            update_notification_id = (
                NotificationId(_parse_id(request.notification_id, "notification_id"))
                if request.notification_id
                else None
            )

            parent = None
            if request.parent_comment_id:
                try:
                    parent_id = CommentId(UUID(request.parent_comment_id))
                except ValueError as e:
                    raise NotFoundError("Comment", request.parent_comment_id) from e
                comment = await self.comment_service.create_reply(
                    blog_id=blog.id,
                    blog_author_id=blog.author_id,
                    author_id=author_id,
                    body=request.body,
                    parent_comment_id=parent_id,
                )
                parent = await self.comment_service.get_by_id(parent_id)
            else:
                comment = await self.comment_service.create_top_level(
                    blog_id=blog.id,
                    blog_author_id=blog.author_id,
                    author_id=author_id,
                    body=request.body,
                )

            await self.follow_up_service.record_and_dispatch(
                comment_created_follow_ups(comment, parent, update_notification_id)
            )

            return CreateCommentResponse(
                comment_id=str(comment.id),
                blog_id=str(comment.blog_id),
                author_id=str(comment.author_id),
                body=comment.body,
                parent_comment_id=(
                    str(comment.parent_comment_id) if comment.parent_comment_id else None
                ),
                is_reply=comment.is_reply,
                child_ids=[str(cid) for cid in comment.child_ids],
                created_at=comment.created_at,
            )


def _parse_id(value: str, field: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {field}: {value}") from e
