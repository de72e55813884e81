"""Publish blog use case."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from inkwell.domain.model import Blog
from inkwell.domain.model.common import utcnow
from inkwell.domain.service import BlogService, FollowUpService, delta_follow_up
from inkwell.domain.value import BlogId, CounterField, EntityRef, TagName, UserId

MAX_DESCRIPTION_LENGTH = 200
MAX_TAGS = 10


class PublishBlogRequest(BaseModel):
    """Publish (or save as draft) request."""

    author_id: str  # User ID from authenticated user
    title: str
    description: str = ""
    banner_url: str | None = None
    content: dict[str, Any] = Field(default_factory=lambda: {"blocks": []})
    tags: list[str] = Field(default_factory=list)
    draft: bool = False
    blog_id: str | None = None  # Set when updating an existing blog


class PublishBlogResponse(BaseModel):
    """Publish blog response."""

    blog_id: str
    slug: str
    draft: bool
    published_at: datetime | None


class PublishBlogUseCase(BaseUseCase):
    """Use case for creating, updating and publishing blogs."""

    def __init__(
        self, blog_service: BlogService, follow_up_service: FollowUpService
    ) -> None:
        """Initialize publish blog use case.

        Args:
            blog_service: Blog domain service
            follow_up_service: Follow-up domain service
        """
        self.blog_service = blog_service
        self.follow_up_service = follow_up_service

    async def execute(self, request: PublishBlogRequest) -> PublishBlogResponse:
        """Execute publish blog flow.

        Drafts need only a title. Publishing needs a description, a banner,
        content blocks and 1-10 tags. The first time a blog goes public its
        author's total_posts moves by one.

        Raises:
            ValidationError: If a required field is missing or invalid
            NotFoundError: If blog_id is set and the blog does not exist
            NotAuthorizedError: If blog_id is set and the caller is not the author
        """
        author_id = UserId(UUID(request.author_id))
        title = request.title.strip()
        description = request.description.strip()
        tags = self._clean_tags(request.tags)

        if not title:
            raise ValidationError("You must provide a title")
        if len(title) > 300:
            raise ValidationError("Title must be at most 300 characters")
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters"
            )
        if len(tags) > MAX_TAGS:
            raise ValidationError(f"Provide at most {MAX_TAGS} tags")
        if not request.draft:
            if not description:
                raise ValidationError("You must provide a blog description")
            if not request.banner_url:
                raise ValidationError("You must provide a blog banner to publish it")
            if not request.content.get("blocks"):
                raise ValidationError("There must be some blog content to publish it")
            if not tags:
                raise ValidationError("Provide tags in order to publish the blog")

        with logfire.span(
            "publish_blog.execute",
            author_id=request.author_id,
            blog_id=request.blog_id,
            draft=request.draft,
        ):
            now = utcnow()
            fields = {
                "title": title,
                "description": description,
                "banner_url": request.banner_url,
                "content": request.content,
                "tags": tags,
                "draft": request.draft,
                "updated_at": now,
            }

            if request.blog_id:
                try:
                    existing_id = BlogId(UUID(request.blog_id))
                except ValueError as e:
                    raise NotFoundError("Blog", request.blog_id) from e
                existing = await self.blog_service.get_by_id(existing_id)
                if existing.author_id != author_id:
                    raise NotAuthorizedError(
                        "update", "blog", request.blog_id, request.author_id
                    )
                if not request.draft and existing.published_at is None:
                    fields["published_at"] = now
                blog = existing.model_copy(update=fields)
            else:
                blog_id = BlogId(uuid4())
                blog = Blog(
                    id=blog_id,
                    slug=await self.blog_service.generate_unique_slug(title, blog_id),
                    author_id=author_id,
                    published_at=None if request.draft else now,
                    created_at=now,
                    **fields,
                )

            saved = await self.blog_service.save_blog(blog)

            if saved.is_published:
                # Keyed per blog, so republishing never counts twice
                await self.follow_up_service.record_and_dispatch(
                    [
                        delta_follow_up(
                            f"blog:{saved.id}:published:user.total_posts",
                            EntityRef.user(saved.author_id),
                            CounterField.TOTAL_POSTS,
                            1,
                        )
                    ]
                )

            return PublishBlogResponse(
                blog_id=str(saved.id),
                slug=saved.slug.root,
                draft=saved.draft,
                published_at=saved.published_at,
            )

    @staticmethod
    def _clean_tags(raw_tags: list[str]) -> list[TagName]:
        tags: list[TagName] = []
        for raw in raw_tags:
            if not raw.strip():
                continue
            if len(raw.strip()) > 50:
                raise ValidationError("Tags must be at most 50 characters")
            tag = TagName(raw)
            if tag not in tags:
                tags.append(tag)
        return tags
