"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
)
from inkwell.domain.service import JWTService

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


def _optional_str(value: UUID | None) -> str | None:
    return str(value) if value else None


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str = Field(max_length=10000)
    blog_author_id: UUID | None = None  # Blog author as known to the client
    parent_comment_id: UUID | None = None  # Parent comment ID for replies
    notification_id: UUID | None = None  # Set when replying from a notification


@router.post(
    "/blogs/{blog_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    blog_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a blog or reply to another comment.

    Requires authentication.

    Args:
        blog_id: Blog UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create comments",
        )

    use_case_request = CreateCommentRequest(
        blog_id=str(blog_id),
        body=request.body,
        author_id=user_id,
        blog_author_id=_optional_str(request.blog_author_id),
        parent_comment_id=_optional_str(request.parent_comment_id),
        notification_id=_optional_str(request.notification_id),
    )
    return await create_comment_use_case.execute(use_case_request)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and every reply under it.

    Allowed for the comment author and the blog author.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), caller_id=user_id)
    )


@router.get("/blogs/{blog_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    blog_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    skip: int = Query(default=0, ge=0),
) -> GetCommentsResponse:
    """Get a page of top-level comments for a blog, newest first.

    Public endpoint.

    Args:
        blog_id: Blog UUID
        get_comments_use_case: Get comments use case from DI
        skip: Number of comments to skip

    Returns:
        Page of top-level comments
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(blog_id=str(blog_id), skip=skip)
    )


@router.get("/comments/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: UUID,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    skip: int = Query(default=0, ge=0),
) -> GetRepliesResponse:
    """Get a page of direct replies to a comment, newest first."""
    return await get_replies_use_case.execute(
        GetRepliesRequest(comment_id=str(comment_id), skip=skip)
    )
