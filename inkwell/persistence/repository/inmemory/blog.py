"""In-memory blog repository for testing."""

from typing import Optional, Sequence

from inkwell.domain.model.blog import Blog
from inkwell.domain.repository.blog import BlogRepository
from inkwell.domain.value import BlogId, CounterField, Slug, TagName, UserId

from .store import InMemoryStore

_COUNTER_FIELDS = (
    "total_likes",
    "total_comments",
    "total_reads",
    "total_parent_comments",
)


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._blogs = store.blogs

    def _published(
        self, tag: Optional[TagName], author_id: Optional[UserId]
    ) -> list[Blog]:
        return [
            b
            for b in self._blogs.values()
            if not b.draft
            and (tag is None or tag in b.tags)
            and (author_id is None or b.author_id == author_id)
        ]

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        return self._blogs.get(blog_id)

    async def find_by_ids(self, blog_ids: Sequence[BlogId]) -> list[Blog]:
        """Find several blogs at once."""
        return [self._blogs[bid] for bid in blog_ids if bid in self._blogs]

    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by its slug."""
        for blog in self._blogs.values():
            if blog.slug == slug:
                return blog
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken."""
        return await self.find_by_slug(slug) is not None

    async def exists(self, blog_id: BlogId) -> bool:
        """Check whether a blog exists."""
        return blog_id in self._blogs

    async def find_published(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> list[Blog]:
        """Find published blogs, most recently published first."""
        blogs = sorted(
            self._published(tag, author_id),
            key=lambda b: (b.published_at or b.created_at, b.id),
            reverse=True,
        )
        return blogs[offset : offset + limit]

    async def find_trending(self, limit: int = 5) -> list[Blog]:
        """Find the most read published blogs."""
        blogs = sorted(
            self._published(None, None),
            key=lambda b: (
                b.total_reads,
                b.total_likes,
                b.published_at or b.created_at,
                b.id,
            ),
            reverse=True,
        )
        return blogs[:limit]

    async def count_published(
        self, tag: Optional[TagName] = None, author_id: Optional[UserId] = None
    ) -> int:
        """Count published blogs matching the filters."""
        return len(self._published(tag, author_id))

    async def save(self, blog: Blog) -> Blog:
        """Save a blog. Counters of an existing blog are kept."""
        existing = self._blogs.get(blog.id)
        if existing is not None:
            blog = blog.model_copy(
                update={name: getattr(existing, name) for name in _COUNTER_FIELDS}
            )
        self._blogs[blog.id] = blog
        return blog

    async def apply_delta(self, blog_id: BlogId, field: CounterField, delta: int) -> bool:
        """Add a delta to a counter (floored at 0)."""
        blog = self._blogs.get(blog_id)
        if blog is None:
            return False
        current = getattr(blog, field.value)
        self._blogs[blog_id] = blog.model_copy(
            update={field.value: max(current + delta, 0)}
        )
        return True
