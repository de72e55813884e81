"""Notification use cases."""

from .count_notifications import (
    CountNotificationsRequest,
    CountNotificationsResponse,
    CountNotificationsUseCase,
)
from .get_notifications import (
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    NotificationItem,
)
from .has_unseen import HasUnseenRequest, HasUnseenResponse, HasUnseenUseCase

__all__ = [
    "CountNotificationsRequest",
    "CountNotificationsResponse",
    "CountNotificationsUseCase",
    "GetNotificationsRequest",
    "GetNotificationsResponse",
    "GetNotificationsUseCase",
    "HasUnseenRequest",
    "HasUnseenResponse",
    "HasUnseenUseCase",
    "NotificationItem",
]
