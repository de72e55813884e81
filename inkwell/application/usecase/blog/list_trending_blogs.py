"""List trending blogs use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.summaries import AuthorSummary
from inkwell.config import PaginationSettings
from inkwell.domain.service import BlogService, UserService


class TrendingBlogItem(BaseModel):
    """Trending blog in response."""

    blog_id: str
    slug: str
    title: str
    published_at: datetime | None
    author: AuthorSummary


class ListTrendingBlogsRequest(BaseModel):
    """List trending blogs request (no parameters)."""


class ListTrendingBlogsResponse(BaseModel):
    """List trending blogs response."""

    blogs: list[TrendingBlogItem]


class ListTrendingBlogsUseCase(BaseUseCase):
    """Use case for listing the most read published blogs."""

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        self.blog_service = blog_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(
        self, request: ListTrendingBlogsRequest
    ) -> ListTrendingBlogsResponse:
        """Execute list trending blogs flow.

        Returns:
            Published blogs ranked by reads, then likes, then recency
        """
        with logfire.span("list_trending_blogs.execute"):
            blogs = await self.blog_service.list_trending(
                limit=self.pagination.trending_blogs_limit
            )
            authors = await self.user_service.get_by_ids([b.author_id for b in blogs])

            return ListTrendingBlogsResponse(
                blogs=[
                    TrendingBlogItem(
                        blog_id=str(blog.id),
                        slug=blog.slug.root,
                        title=blog.title,
                        published_at=blog.published_at,
                        author=AuthorSummary.of(blog.author_id, authors.get(blog.author_id)),
                    )
                    for blog in blogs
                ]
            )
