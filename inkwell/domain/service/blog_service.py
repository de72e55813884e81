"""Blog domain service."""

import re

import logfire

from inkwell.domain.error import NotFoundError
from inkwell.domain.model.blog import Blog
from inkwell.domain.repository import BlogRepository
from inkwell.domain.value import BlogId, Slug, TagName, UserId

from .base import Service


class BlogService(Service):
    """Domain service for blog operations."""

    def __init__(self, blog_repository: BlogRepository) -> None:
        """Initialize blog service.

        Args:
            blog_repository: Blog repository
        """
        self.blog_repository = blog_repository

    async def save_blog(self, blog: Blog) -> Blog:
        """Save a blog.

        Args:
            blog: Blog to save

        Returns:
            Saved blog
        """
        with logfire.span(
            "blog_service.save_blog", blog_id=str(blog.id), title=blog.title
        ):
            saved = await self.blog_repository.save(blog)
            logfire.info("Blog saved", blog_id=str(saved.id), draft=saved.draft)
            return saved

    async def get_by_id(self, blog_id: BlogId) -> Blog:
        """Get a blog by ID.

        Args:
            blog_id: Blog ID

        Returns:
            The blog

        Raises:
            NotFoundError: If the blog does not exist
        """
        with logfire.span("blog_service.get_by_id", blog_id=str(blog_id)):
            blog = await self.blog_repository.find_by_id(blog_id)
            if not blog:
                logfire.warn("Blog not found", blog_id=str(blog_id))
                raise NotFoundError("Blog", str(blog_id))
            return blog

    async def get_published(self, blog_id: BlogId) -> Blog:
        """Get a blog that is open for comments and likes.

        Raises:
            NotFoundError: If the blog does not exist or is a draft
        """
        blog = await self.get_by_id(blog_id)
        if not blog.is_published:
            logfire.warn("Blog is a draft", blog_id=str(blog_id))
            raise NotFoundError("Blog", str(blog_id))
        return blog

    async def get_by_slug(self, slug: Slug) -> Blog:
        """Get a blog by slug.

        Raises:
            NotFoundError: If no blog has this slug
        """
        with logfire.span("blog_service.get_by_slug", slug=str(slug)):
            blog = await self.blog_repository.find_by_slug(slug)
            if not blog:
                logfire.warn("Blog not found by slug", slug=str(slug))
                raise NotFoundError("Blog", str(slug))
            return blog

    async def list_published(
        self,
        tag: TagName | None = None,
        author_id: UserId | None = None,
        limit: int = 5,
        offset: int = 0,
    ) -> tuple[list[Blog], int]:
        """List published blogs, latest first.

        Returns:
            (page of blogs, total number of matching blogs)
        """
        with logfire.span(
            "blog_service.list_published",
            tag=str(tag) if tag else None,
            author_id=str(author_id) if author_id else None,
            limit=limit,
            offset=offset,
        ):
            blogs = await self.blog_repository.find_published(
                tag=tag, author_id=author_id, limit=limit, offset=offset
            )
            total = await self.blog_repository.count_published(
                tag=tag, author_id=author_id
            )
            return blogs, total

    async def list_trending(self, limit: int = 5) -> list[Blog]:
        """List the most read published blogs (reads, then likes, then recency)."""
        with logfire.span("blog_service.list_trending", limit=limit):
            blogs = await self.blog_repository.find_trending(limit=limit)
            logfire.info("Trending blogs retrieved", count=len(blogs))
            return blogs

    async def generate_unique_slug(self, title: str, blog_id: BlogId) -> Slug:
        """Generate a unique slug from a title.

        Handles collisions by appending numeric suffixes.

        Args:
            title: Blog title to slugify
            blog_id: Blog ID (used for fallback if title produces empty slug)

        Returns:
            Unique slug for the blog
        """
        with logfire.span(
            "blog_service.generate_unique_slug", blog_id=str(blog_id), title=title
        ):
            base_slug_str = self._slugify(title)

            if not base_slug_str:
                fallback = f"blog-{blog_id.hex[:8]}"
                logfire.info(
                    "Using fallback slug for empty title",
                    blog_id=str(blog_id),
                    slug=fallback,
                )
                return Slug(fallback)

            slug_str = base_slug_str
            counter = 1
            while await self.blog_repository.slug_exists(Slug(slug_str)):
                suffix = f"-{counter}"
                slug_str = base_slug_str[: 100 - len(suffix)].rstrip("-") + suffix
                counter += 1

            slug = Slug(slug_str)
            logfire.info(
                "Generated unique slug",
                blog_id=str(blog_id),
                slug=str(slug),
                had_collision=counter > 1,
            )
            return slug

    @staticmethod
    def _slugify(title: str) -> str:
        """Convert title to URL-safe slug format.

        Args:
            title: Title to slugify

        Returns:
            URL-safe slug string (may be empty if title has no valid chars)
        """
        slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
        return slug.strip("-")[:100].rstrip("-")
