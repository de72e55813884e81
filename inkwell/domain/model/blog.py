"""Blog aggregate root.

Blogs are authored by users and can be saved as drafts before publishing.
Counter fields are derived and only ever change through ledger deltas.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import BlogId, Slug, TagName, UserId


class Blog(DomainModel):
    """Blog aggregate root."""

    id: BlogId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=200)
    banner_url: Optional[str] = None
    content: dict[str, Any] = Field(default_factory=lambda: {"blocks": []})
    tags: list[TagName] = Field(default_factory=list, max_length=10)
    author_id: UserId
    draft: bool = False
    published_at: Optional[datetime] = None
    total_likes: int = Field(default=0, ge=0)
    total_comments: int = Field(default=0, ge=0)
    total_reads: int = Field(default=0, ge=0)
    total_parent_comments: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_published(self) -> bool:
        return not self.draft
