"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.error import NotAuthorizedError
from inkwell.domain.service import (
    CommentService,
    FollowUpService,
    comment_deleted_follow_ups,
)
from inkwell.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    caller_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    status: str = "done"
    deleted_count: int
    deleted_ids: list[str]


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment together with its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        follow_up_service: FollowUpService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            follow_up_service: Follow-up domain service
        """
        self.comment_service = comment_service
        self.follow_up_service = follow_up_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Steps:
        1. Authorize: caller is the comment's author or the blog's author
        2. Cascade delete the subtree
        3. Record notification cleanup and inverse counter deltas per removed node
        4. Apply follow-ups; their failures are logged, never raised

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller may not delete the comment
        """
        comment_id = CommentId(UUID(request.comment_id))
        caller_id = UserId(UUID(request.caller_id))

        with logfire.span(
            "delete_comment.execute",
            comment_id=request.comment_id,
            caller_id=request.caller_id,
        ):
            comment = await self.comment_service.get_by_id(comment_id)
            if caller_id not in (comment.author_id, comment.blog_author_id):
                logfire.warn(
                    "Comment delete refused",
                    comment_id=request.comment_id,
                    caller_id=request.caller_id,
                )
                raise NotAuthorizedError(
                    "delete", "comment", request.comment_id, request.caller_id
                )

            cascade = await self.comment_service.delete_recursive(comment_id)

            follow_ups = [
                follow_up
                for node in cascade.deleted
                for follow_up in comment_deleted_follow_ups(node)
            ]
            await self.follow_up_service.record_and_dispatch(follow_ups)

            return DeleteCommentResponse(
                deleted_count=len(cascade.deleted),
                deleted_ids=[str(node.id) for node in cascade.deleted],
            )
