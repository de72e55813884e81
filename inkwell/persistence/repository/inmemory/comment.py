"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from inkwell.domain.model.comment import Comment
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import BlogId, CommentId

from .store import InMemoryStore


def _newest_first(comments: list[Comment]) -> list[Comment]:
    return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._comments = store.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID. The store is single-threaded so no lock is taken."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments at once."""
        return [self._comments[cid] for cid in comment_ids if cid in self._comments]

    async def find_top_level(
        self, blog_id: BlogId, skip: int = 0, limit: int = 5
    ) -> list[Comment]:
        """Find top-level comments of a blog, newest first."""
        comments = [
            c for c in self._comments.values() if c.blog_id == blog_id and not c.is_reply
        ]
        return _newest_first(comments)[skip : skip + limit]

    async def find_replies(
        self, parent_id: CommentId, skip: int = 0, limit: int = 5
    ) -> list[Comment]:
        """Find direct replies to a comment, newest first."""
        replies = [
            c for c in self._comments.values() if c.parent_comment_id == parent_id
        ]
        return _newest_first(replies)[skip : skip + limit]

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find every direct child of a comment."""
        children = [
            c for c in self._comments.values() if c.parent_comment_id == parent_id
        ]
        children.sort(key=lambda c: c.created_at)
        return children

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def append_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Append a child id to the parent's child_ids."""
        parent = self._comments.get(parent_id)
        if parent is None:
            return False
        self._comments[parent_id] = parent.model_copy(
            update={"child_ids": [*parent.child_ids, child_id]}
        )
        return True

    async def remove_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Remove a child id from the parent's child_ids."""
        parent = self._comments.get(parent_id)
        if parent is None:
            return False
        self._comments[parent_id] = parent.model_copy(
            update={"child_ids": [cid for cid in parent.child_ids if cid != child_id]}
        )
        return True

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete a set of comments."""
        deleted = 0
        for comment_id in set(comment_ids):
            if self._comments.pop(comment_id, None) is not None:
                deleted += 1
        return deleted

    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count comments of a blog."""
        return sum(1 for c in self._comments.values() if c.blog_id == blog_id)
