"""Get blog use case."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.summaries import AuthorSummary
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model import User
from inkwell.domain.service import (
    BlogService,
    FollowUpService,
    UserService,
    delta_follow_up,
)
from inkwell.domain.value import BlogMode, CounterField, EntityRef, Slug, UserId


class BlogActivity(BaseModel):
    """Blog counters."""

    total_likes: int
    total_comments: int
    total_reads: int
    total_parent_comments: int


class GetBlogRequest(BaseModel):
    """Get blog request."""

    slug: str
    caller_id: str | None = None  # Current user ID (if authenticated)
    mode: BlogMode = BlogMode.READ


class GetBlogResponse(BaseModel):
    """Get blog response."""

    blog_id: str
    slug: str
    title: str
    description: str
    banner_url: str | None
    content: dict[str, Any]
    tags: list[str]
    draft: bool
    published_at: datetime | None
    author: AuthorSummary
    activity: BlogActivity


class GetBlogUseCase(BaseUseCase):
    """Use case for opening a blog.

    Opening in read mode counts a read on the blog and on its author.
    """

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        follow_up_service: FollowUpService,
    ) -> None:
        """Initialize get blog use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service
            follow_up_service: Follow-up domain service
        """
        self.blog_service = blog_service
        self.user_service = user_service
        self.follow_up_service = follow_up_service

    async def execute(self, request: GetBlogRequest) -> GetBlogResponse:
        """Execute get blog flow.

        Raises:
            ValidationError: If the slug is malformed
            NotFoundError: If no blog has the slug, or it is a draft of someone else
        """
        try:
            slug = Slug(request.slug)
        except ValueError as e:
            raise ValidationError(f"Invalid slug: {request.slug}") from e

        blog = await self.blog_service.get_by_slug(slug)
        caller_id = UserId(UUID(request.caller_id)) if request.caller_id else None

        if blog.draft and caller_id != blog.author_id:
            raise NotFoundError("Blog", request.slug)

        if request.mode != BlogMode.EDIT and blog.is_published:
            read_key = f"blog:{blog.id}:read:{uuid4().hex}"
            await self.follow_up_service.record_and_dispatch(
                [
                    delta_follow_up(
                        f"{read_key}:blog.total_reads",
                        EntityRef.blog(blog.id),
                        CounterField.TOTAL_READS,
                        1,
                    ),
                    delta_follow_up(
                        f"{read_key}:user.total_reads",
                        EntityRef.user(blog.author_id),
                        CounterField.TOTAL_READS,
                        1,
                    ),
                ]
            )

        authors = await self.user_service.get_by_ids([blog.author_id])
        author: User | None = authors.get(blog.author_id)

        return GetBlogResponse(
            blog_id=str(blog.id),
            slug=blog.slug.root,
            title=blog.title,
            description=blog.description,
            banner_url=blog.banner_url,
            content=blog.content,
            tags=[tag.root for tag in blog.tags],
            draft=blog.draft,
            published_at=blog.published_at,
            author=AuthorSummary.of(blog.author_id, author),
            activity=BlogActivity(
                total_likes=blog.total_likes,
                total_comments=blog.total_comments,
                total_reads=blog.total_reads,
                total_parent_comments=blog.total_parent_comments,
            ),
        )
