"""User domain service (account directory reads)."""

import logfire

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import UserId
from inkwell.domain.value.types import Username

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch-load users, keyed by ID. Unknown IDs are left out."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        with logfire.span("user_service.get_by_ids", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If no account has this username
        """
        with logfire.span("user_service.get_by_username", username=username):
            try:
                user = await self.user_repository.find_by_username(Username(username))
            except ValueError as e:
                raise NotFoundError("User", username) from e
            if not user:
                logfire.warn("User not found by username", username=username)
                raise NotFoundError("User", username)
            return user

    async def search(self, query: str, limit: int = 50) -> list[User]:
        """Search users by username substring, ignoring case.

        Args:
            query: Text to look for in usernames
            limit: Maximum number of users to return

        Returns:
            Matching users ordered by username

        Raises:
            ValidationError: If the query is blank
        """
        query = query.strip()
        if not query:
            raise ValidationError("Search query must not be empty")
        with logfire.span("user_service.search", query=query, limit=limit):
            users = await self.user_repository.search_by_username(query, limit=limit)
            logfire.info("Users searched", query=query, count=len(users))
            return users
