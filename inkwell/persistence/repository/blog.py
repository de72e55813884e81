"""PostgreSQL implementation of Blog repository."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Blog
from inkwell.domain.repository import BlogRepository
from inkwell.domain.value import BlogId, CounterField, Slug, TagName, UserId
from inkwell.persistence.database import storage_guard
from inkwell.persistence.mappers import blog_to_dict, row_to_blog
from inkwell.persistence.tables import blogs_table

# Counters only move through apply_delta
_COUNTER_COLUMNS = {
    "total_likes",
    "total_comments",
    "total_reads",
    "total_parent_comments",
}


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _published(stmt, tag: Optional[TagName], author_id: Optional[UserId]):
        stmt = stmt.where(blogs_table.c.draft.is_(False))
        if tag is not None:
            stmt = stmt.where(blogs_table.c.tags.any(tag.root))
        if author_id is not None:
            stmt = stmt.where(blogs_table.c.author_id == author_id)
        return stmt

    @storage_guard
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    @storage_guard
    async def find_by_ids(self, blog_ids: Sequence[BlogId]) -> List[Blog]:
        """Find several blogs at once."""
        if not blog_ids:
            return []
        stmt = select(blogs_table).where(blogs_table.c.id.in_(list(blog_ids)))
        result = await self.session.execute(stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by its slug."""
        stmt = select(blogs_table).where(blogs_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    @storage_guard
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken."""
        stmt = select(exists().where(blogs_table.c.slug == slug.root))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    @storage_guard
    async def exists(self, blog_id: BlogId) -> bool:
        """Check whether a blog exists."""
        stmt = select(exists().where(blogs_table.c.id == blog_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    @storage_guard
    async def find_published(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Blog]:
        """Find published blogs, most recently published first."""
        stmt = self._published(select(blogs_table), tag, author_id)
        stmt = (
            stmt.order_by(
                desc(blogs_table.c.published_at).nulls_last(), desc(blogs_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def find_trending(self, limit: int = 5) -> List[Blog]:
        """Find the most read published blogs."""
        stmt = (
            self._published(select(blogs_table), None, None)
            .order_by(
                desc(blogs_table.c.total_reads),
                desc(blogs_table.c.total_likes),
                desc(blogs_table.c.published_at).nulls_last(),
                desc(blogs_table.c.id),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    @storage_guard
    async def count_published(
        self, tag: Optional[TagName] = None, author_id: Optional[UserId] = None
    ) -> int:
        """Count published blogs matching the filters."""
        stmt = self._published(
            select(func.count()).select_from(blogs_table), tag, author_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @storage_guard
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update). Counters are left untouched on update."""
        blog_dict = blog_to_dict(blog)
        existing = await self.find_by_id(blog.id)

        if existing:
            values = {k: v for k, v in blog_dict.items() if k not in _COUNTER_COLUMNS}
            stmt = (
                blogs_table.update()
                .where(blogs_table.c.id == blog.id)
                .values(**values)
            )
        else:
            stmt = blogs_table.insert().values(**blog_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(blog.id) or blog

    @storage_guard
    async def apply_delta(self, blog_id: BlogId, field: CounterField, delta: int) -> bool:
        """Atomically add a delta to a counter column (floored at 0)."""
        column = blogs_table.c[field.value]
        stmt = (
            blogs_table.update()
            .where(blogs_table.c.id == blog_id)
            .values({column: func.greatest(column + delta, 0)})
            .returning(blogs_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None
