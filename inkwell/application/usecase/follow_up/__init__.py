"""Follow-up use cases."""

from .drain_follow_ups import (
    DrainFollowUpsRequest,
    DrainFollowUpsResponse,
    DrainFollowUpsUseCase,
)

__all__ = [
    "DrainFollowUpsRequest",
    "DrainFollowUpsResponse",
    "DrainFollowUpsUseCase",
]
