"""Count notifications use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import NotificationService
from inkwell.domain.value import NotificationFilter, UserId


class CountNotificationsRequest(BaseModel):
    """Count notifications request."""

    recipient_id: str  # User ID from authenticated user
    filter: NotificationFilter = NotificationFilter.ALL


class CountNotificationsResponse(BaseModel):
    """Count notifications response."""

    total_docs: int


class CountNotificationsUseCase(BaseUseCase):
    """Use case for counting the caller's notifications (for pagination)."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: CountNotificationsRequest
    ) -> CountNotificationsResponse:
        total = await self.notification_service.count_feed(
            UserId(UUID(request.recipient_id)), filter_type=request.filter
        )
        return CountNotificationsResponse(total_docs=total)
