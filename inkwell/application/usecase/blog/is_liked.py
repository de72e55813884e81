"""Is-liked check use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import NotificationService
from inkwell.domain.value import BlogId, UserId


class IsLikedRequest(BaseModel):
    """Is-liked request."""

    blog_id: str  # UUID string
    actor_id: str  # User ID from authenticated user


class IsLikedResponse(BaseModel):
    """Is-liked response."""

    liked_by_user: bool


class IsLikedUseCase(BaseUseCase):
    """Use case for checking whether the caller likes a blog."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: IsLikedRequest) -> IsLikedResponse:
        liked = await self.notification_service.is_liked(
            BlogId(UUID(request.blog_id)), UserId(UUID(request.actor_id))
        )
        return IsLikedResponse(liked_by_user=liked)
