"""Unseen notifications check use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import NotificationService
from inkwell.domain.value import UserId


class HasUnseenRequest(BaseModel):
    """Unseen check request."""

    recipient_id: str  # User ID from authenticated user


class HasUnseenResponse(BaseModel):
    """Unseen check response."""

    new_notification_available: bool


class HasUnseenUseCase(BaseUseCase):
    """Use case for checking whether the caller has new notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: HasUnseenRequest) -> HasUnseenResponse:
        available = await self.notification_service.has_unseen(
            UserId(UUID(request.recipient_id))
        )
        return HasUnseenResponse(new_notification_available=available)
