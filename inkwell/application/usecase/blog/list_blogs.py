"""List blogs use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.summaries import AuthorSummary
from inkwell.config import PaginationSettings
from inkwell.domain.error import ValidationError
from inkwell.domain.service import BlogService, UserService
from inkwell.domain.value import TagName, UserId


class BlogListItem(BaseModel):
    """Blog list item in response."""

    blog_id: str
    slug: str
    title: str
    description: str
    banner_url: str | None
    tags: list[str]
    published_at: datetime | None
    author: AuthorSummary
    total_likes: int
    total_comments: int
    total_reads: int


class ListBlogsRequest(BaseModel):
    """List blogs request."""

    page: int = Field(default=1, ge=1)
    tag: str | None = None  # Filter by tag name
    author_id: str | None = None  # Filter by author


class ListBlogsResponse(BaseModel):
    """List blogs response."""

    blogs: list[BlogListItem]
    total: int
    page: int
    page_size: int


class ListBlogsUseCase(BaseUseCase):
    """Use case for listing the latest published blogs."""

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list blogs use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service for author summaries
            pagination: Page sizes
        """
        self.blog_service = blog_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: ListBlogsRequest) -> ListBlogsResponse:
        """Execute list blogs flow.

        Args:
            request: Page number and optional tag/author filters

        Returns:
            Page of published blogs, latest first, with the total count
        """
        page_size = self.pagination.blogs_page_size
        with logfire.span(
            "list_blogs.execute",
            page=request.page,
            tag=request.tag,
            author_id=request.author_id,
        ):
            try:
                tag_filter = (
                    TagName(request.tag) if request.tag and request.tag.strip() else None
                )
            except ValueError as e:
                raise ValidationError(f"Invalid tag: {request.tag}") from e
            author_filter = UserId(UUID(request.author_id)) if request.author_id else None

            blogs, total = await self.blog_service.list_published(
                tag=tag_filter,
                author_id=author_filter,
                limit=page_size,
                offset=(request.page - 1) * page_size,
            )
            authors = await self.user_service.get_by_ids([b.author_id for b in blogs])

            return ListBlogsResponse(
                blogs=[
                    BlogListItem(
                        blog_id=str(blog.id),
                        slug=blog.slug.root,
                        title=blog.title,
                        description=blog.description,
                        banner_url=blog.banner_url,
                        tags=[tag.root for tag in blog.tags],
                        published_at=blog.published_at,
                        author=AuthorSummary.of(blog.author_id, authors.get(blog.author_id)),
                        total_likes=blog.total_likes,
                        total_comments=blog.total_comments,
                        total_reads=blog.total_reads,
                    )
                    for blog in blogs
                ],
                total=total,
                page=request.page,
                page_size=page_size,
            )
