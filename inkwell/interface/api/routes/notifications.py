"""Notification routes.

All notification routes act on the authenticated caller's own feed.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from inkwell.application.usecase.notification import (
    CountNotificationsRequest,
    CountNotificationsResponse,
    CountNotificationsUseCase,
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    HasUnseenRequest,
    HasUnseenResponse,
    HasUnseenUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.domain.value import NotificationFilter

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


def _require_user(jwt_service: JWTService, auth_token: str | None) -> str:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to read notifications",
        )
    return user_id


@router.get("/unseen", response_model=HasUnseenResponse)
async def has_unseen(
    has_unseen_use_case: FromDishka[HasUnseenUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> HasUnseenResponse:
    """Whether the caller has any unseen notification (excluding their own actions)."""
    user_id = _require_user(jwt_service, auth_token)
    return await has_unseen_use_case.execute(HasUnseenRequest(recipient_id=user_id))


@router.get("/count", response_model=CountNotificationsResponse)
async def count_notifications(
    count_notifications_use_case: FromDishka[CountNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    filter: NotificationFilter = Query(default=NotificationFilter.ALL),
    auth_token: str | None = Cookie(default=None),
) -> CountNotificationsResponse:
    """Count the caller's notifications matching a filter."""
    user_id = _require_user(jwt_service, auth_token)
    return await count_notifications_use_case.execute(
        CountNotificationsRequest(recipient_id=user_id, filter=filter)
    )


@router.get("", response_model=GetNotificationsResponse)
async def get_notifications(
    get_notifications_use_case: FromDishka[GetNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    filter: NotificationFilter = Query(default=NotificationFilter.ALL),
    deleted_count: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> GetNotificationsResponse:
    """Get a page of the caller's notifications, newest first.

    Every notification on the returned page is marked seen. The response
    carries each record's seen flag as it was before this read.

    Args:
        get_notifications_use_case: Get notifications use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based page number
        filter: Notification type filter
        deleted_count: Records the client already removed from earlier pages
        auth_token: JWT token from cookie

    Returns:
        Page of enriched notifications
    """
    user_id = _require_user(jwt_service, auth_token)
    return await get_notifications_use_case.execute(
        GetNotificationsRequest(
            recipient_id=user_id,
            page=page,
            filter=filter,
            deleted_count=deleted_count,
        )
    )
