"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.blog import Blog
from inkwell.domain.value import BlogId, CounterField, Slug, TagName, UserId


class BlogRepository(ABC):
    """Repository for Blog aggregate.

    Defines the contract for blog persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, blog_ids: Sequence[BlogId]) -> List[Blog]:
        """Find several blogs at once (batch query). Unknown IDs are skipped."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by its slug."""
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        pass

    @abstractmethod
    async def exists(self, blog_id: BlogId) -> bool:
        """Check whether a blog exists."""
        pass

    @abstractmethod
    async def find_published(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Blog]:
        """Find published blogs, most recently published first.

        Args:
            tag: Filter by tag (None for all tags)
            author_id: Filter by author (None for all authors)
            limit: Maximum number of blogs to return
            offset: Number of blogs to skip

        Returns:
            Page of published blogs
        """
        pass

    @abstractmethod
    async def find_trending(self, limit: int = 5) -> List[Blog]:
        """Find the most read published blogs.

        Ordered by total_reads, then total_likes, then publication date, all
        descending.

        Args:
            limit: Maximum number of blogs to return

        Returns:
            Trending blogs
        """
        pass

    @abstractmethod
    async def count_published(
        self, tag: Optional[TagName] = None, author_id: Optional[UserId] = None
    ) -> int:
        """Count published blogs matching the filters."""
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Counter fields are never written by save; they only move through
        apply_delta.

        Args:
            blog: The blog to save

        Returns:
            The saved blog
        """
        pass

    @abstractmethod
    async def apply_delta(self, blog_id: BlogId, field: CounterField, delta: int) -> bool:
        """Atomically add a signed delta to a counter (floored at 0).

        Uses a SQL-level increment, never read-modify-write.

        Returns:
            True if the blog existed and was updated
        """
        pass
