"""User directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from inkwell.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/search", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    query: str = Query(min_length=1),
) -> SearchUsersResponse:
    """Find accounts whose username contains the query, ignoring case.

    Args:
        search_users_use_case: Search users use case from DI
        query: Username fragment

    Returns:
        Up to 50 matching accounts
    """
    return await search_users_use_case.execute(SearchUsersRequest(query=query))


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get the public profile of an account."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(username=username)
    )
