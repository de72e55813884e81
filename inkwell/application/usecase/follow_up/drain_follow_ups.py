"""Drain follow-ups use case."""

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import FollowUpService


class DrainFollowUpsRequest(BaseModel):
    """Drain request."""

    limit: int | None = Field(default=None, ge=1)


class DrainFollowUpsResponse(BaseModel):
    """Drain response."""

    applied: int
    retrying: int
    failed: int


class DrainFollowUpsUseCase(BaseUseCase):
    """Use case for applying follow-ups left pending by earlier requests."""

    def __init__(self, follow_up_service: FollowUpService) -> None:
        """Initialize drain follow-ups use case.

        Args:
            follow_up_service: Follow-up domain service
        """
        self.follow_up_service = follow_up_service

    async def execute(self, request: DrainFollowUpsRequest) -> DrainFollowUpsResponse:
        report = await self.follow_up_service.drain(limit=request.limit)
        return DrainFollowUpsResponse(
            applied=report.applied, retrying=report.retrying, failed=report.failed
        )
