"""Get user profile use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import UserService


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str


class GetUserProfileResponse(BaseModel):
    """Public profile of an account."""

    user_id: str
    username: str
    fullname: str
    profile_img: str | None
    bio: str | None
    total_posts: int
    total_reads: int
    joined_at: datetime


class GetUserProfileUseCase(BaseUseCase):
    """Use case for reading a public profile by username."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Email and other private account fields are never exposed.

        Args:
            request: Username to look up

        Returns:
            Public profile with the account's counters

        Raises:
            NotFoundError: If no account has this username
        """
        with logfire.span("get_user_profile.execute", username=request.username):
            user = await self.user_service.get_by_username(request.username)

            return GetUserProfileResponse(
                user_id=str(user.id),
                username=user.username.root,
                fullname=user.fullname,
                profile_img=user.profile_img,
                bio=user.bio,
                total_posts=user.total_posts,
                total_reads=user.total_reads,
                joined_at=user.created_at,
            )
