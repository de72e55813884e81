"""Comment entity.

Comments form a tree under a blog with unbounded depth. Each node keeps a
link to its parent and the ordered ids of its direct replies.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import BlogId, CommentId, UserId


class Comment(DomainModel):
    """Comment node.

    Threading is managed through:
    - parent_comment_id: Direct parent comment (None for top-level)
    - is_reply: True iff parent_comment_id is set
    - child_ids: Direct replies, in creation order

    blog_author_id is a snapshot of the blog's author taken at creation. It
    is used as an authorization cache for deletes and is never refreshed, so
    it would go stale if blog ownership ever moved.
    """

    id: CommentId
    blog_id: BlogId
    blog_author_id: UserId
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    parent_comment_id: Optional[CommentId] = None
    is_reply: bool = False
    child_ids: list[CommentId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_reply_link(self) -> "Comment":
        """A node is a reply exactly when it has a parent."""
        if self.is_reply != (self.parent_comment_id is not None):
            raise ValueError("is_reply must be set iff parent_comment_id is set")
        return self
