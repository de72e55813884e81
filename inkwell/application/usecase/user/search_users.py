"""Search users use case."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.summaries import AuthorSummary
from inkwell.config import PaginationSettings
from inkwell.domain.service import UserService


class SearchUsersRequest(BaseModel):
    """Search users request."""

    query: str


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[AuthorSummary]


class SearchUsersUseCase(BaseUseCase):
    """Use case for finding accounts by username."""

    def __init__(self, user_service: UserService, pagination: PaginationSettings) -> None:
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Execute search users flow.

        Raises:
            ValidationError: If the query is blank
        """
        with logfire.span("search_users.execute", query=request.query):
            users = await self.user_service.search(
                request.query, limit=self.pagination.user_search_limit
            )
            return SearchUsersResponse(
                users=[AuthorSummary.of(user.id, user) for user in users]
            )
