"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.config import PaginationSettings
from inkwell.domain.service import CommentService, UserService
from inkwell.domain.value import CommentId

from .get_comments import CommentItem, to_comment_items


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str  # UUID string of the parent comment
    skip: int = Field(default=0, ge=0)


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    comment_id: str
    replies: list[CommentItem]
    skip: int
    limit: int


class GetRepliesUseCase(BaseUseCase):
    """Use case for listing direct replies to a comment, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Raises:
            NotFoundError: If the parent comment does not exist
        """
        limit = self.pagination.comments_page_size
        replies = await self.comment_service.list_replies(
            CommentId(UUID(request.comment_id)), skip=request.skip, limit=limit
        )
        return GetRepliesResponse(
            comment_id=request.comment_id,
            replies=await to_comment_items(replies, self.user_service),
            skip=request.skip,
            limit=limit,
        )
