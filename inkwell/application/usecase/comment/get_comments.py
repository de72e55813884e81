"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.summaries import AuthorSummary
from inkwell.config import PaginationSettings
from inkwell.domain.model import Comment
from inkwell.domain.service import CommentService, UserService
from inkwell.domain.value import BlogId


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    blog_id: str
    author: AuthorSummary
    body: str
    parent_comment_id: str | None
    is_reply: bool
    child_ids: list[str]
    created_at: datetime


async def to_comment_items(
    comments: list[Comment], user_service: UserService
) -> list[CommentItem]:
    """Convert comments to response items with author summaries (one batch query)."""
    users = await user_service.get_by_ids([comment.author_id for comment in comments])
    return [
        CommentItem(
            comment_id=str(comment.id),
            blog_id=str(comment.blog_id),
            author=AuthorSummary.of(comment.author_id, users.get(comment.author_id)),
            body=comment.body,
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            is_reply=comment.is_reply,
            child_ids=[str(cid) for cid in comment.child_ids],
            created_at=comment.created_at,
        )
        for comment in comments
    ]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    blog_id: str  # UUID string
    skip: int = Field(default=0, ge=0)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    blog_id: str
    comments: list[CommentItem]
    skip: int
    limit: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing the top-level comments of a blog, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service for author summaries
            pagination: Page sizes
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Blog ID and number of comments already shown

        Returns:
            Next page of top-level comments
        """
        limit = self.pagination.comments_page_size
        comments = await self.comment_service.list_top_level(
            BlogId(UUID(request.blog_id)), skip=request.skip, limit=limit
        )
        return GetCommentsResponse(
            blog_id=request.blog_id,
            comments=await to_comment_items(comments, self.user_service),
            skip=request.skip,
            limit=limit,
        )
