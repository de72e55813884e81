"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import BlogId, CommentId


class CommentRepository(ABC):
    """Repository for Comment nodes.

    Defines the contract for comment tree persistence.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID and lock it until the transaction ends.

        Concurrent writers to the same node (such as append_child) wait for
        the lock, so a subtree cannot gain children while it is being deleted.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once (batch query). Unknown IDs are skipped."""
        pass

    @abstractmethod
    async def find_top_level(
        self, blog_id: BlogId, skip: int = 0, limit: int = 5
    ) -> List[Comment]:
        """Find top-level comments of a blog, newest first.

        Ties on created_at are broken by id so pages are stable.

        Args:
            blog_id: The blog ID
            skip: Number of comments to skip
            limit: Maximum number of comments to return

        Returns:
            Page of top-level comments
        """
        pass

    @abstractmethod
    async def find_replies(
        self, parent_id: CommentId, skip: int = 0, limit: int = 5
    ) -> List[Comment]:
        """Find direct replies to a comment, newest first.

        Args:
            parent_id: The parent comment ID
            skip: Number of replies to skip
            limit: Maximum number of replies to return

        Returns:
            Page of replies
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find every direct child of a comment, unpaginated.

        Args:
            parent_id: The parent comment ID

        Returns:
            All direct children
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def append_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Atomically append a child id to a parent's child_ids.

        Returns:
            True if the parent existed and was updated
        """
        pass

    @abstractmethod
    async def remove_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Atomically remove a child id from a parent's child_ids.

        Returns:
            True if the parent existed and was updated
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete a set of comments.

        Args:
            comment_ids: IDs to delete

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count every comment (top-level and replies) of a blog."""
        pass
