"""Comment domain service."""

from collections import deque
from dataclasses import dataclass, field
from uuid import uuid4

import logfire

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model.comment import Comment
from inkwell.domain.model.common import utcnow
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import BlogId, CommentId, UserId

from .base import Service


@dataclass
class CascadeDeletion:
    """Outcome of a cascading delete.

    deleted holds every removed node (root first, then descendants in
    breadth-first order) so callers can issue matching counter and
    notification cleanup per node.
    """

    root: Comment
    deleted: list[Comment] = field(default_factory=list)

    @property
    def deleted_ids(self) -> set[CommentId]:
        return {comment.id for comment in self.deleted}

    @property
    def affected_blog_id(self) -> BlogId:
        return self.root.blog_id

    @property
    def affected_parent_id(self) -> CommentId | None:
        return self.root.parent_comment_id


class CommentService(Service):
    """Domain service for the comment tree."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_top_level(
        self,
        blog_id: BlogId,
        blog_author_id: UserId,
        author_id: UserId,
        body: str,
    ) -> Comment:
        """Create a top-level comment on a blog.

        Args:
            blog_id: Blog being commented on
            blog_author_id: Author of the blog (stored as an authorization cache)
            author_id: Commenting user
            body: Comment text

        Returns:
            The created comment

        Raises:
            ValidationError: If body is empty
        """
        with logfire.span(
            "comment_service.create_top_level",
            blog_id=str(blog_id),
            author_id=str(author_id),
        ):
            body = self._clean_body(body)
            comment = Comment(
                id=CommentId(uuid4()),
                blog_id=blog_id,
                blog_author_id=blog_author_id,
                author_id=author_id,
                body=body,
                parent_comment_id=None,
                is_reply=False,
                child_ids=[],
                created_at=utcnow(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), blog_id=str(blog_id)
            )
            return saved

    async def create_reply(
        self,
        blog_id: BlogId,
        blog_author_id: UserId,
        author_id: UserId,
        body: str,
        parent_comment_id: CommentId,
    ) -> Comment:
        """Reply to an existing comment.

        The new id is appended to the parent's child_ids.

        Args:
            blog_id: Blog the thread belongs to
            blog_author_id: Author of the blog
            author_id: Replying user
            body: Reply text
            parent_comment_id: Comment being replied to

        Returns:
            The created reply

        Raises:
            ValidationError: If body is empty
            NotFoundError: If the parent does not exist in this blog
        """
        with logfire.span(
            "comment_service.create_reply",
            blog_id=str(blog_id),
            author_id=str(author_id),
            parent_comment_id=str(parent_comment_id),
        ):
            body = self._clean_body(body)

            parent = await self.comment_repository.find_by_id(parent_comment_id)
            if not parent or parent.blog_id != blog_id:
                logfire.warn(
                    "Parent comment not found in blog",
                    parent_comment_id=str(parent_comment_id),
                    blog_id=str(blog_id),
                )
                raise NotFoundError("Comment", str(parent_comment_id))

            reply = Comment(
                id=CommentId(uuid4()),
                blog_id=blog_id,
                blog_author_id=blog_author_id,
                author_id=author_id,
                body=body,
                parent_comment_id=parent_comment_id,
                is_reply=True,
                child_ids=[],
                created_at=utcnow(),
            )
            saved = await self.comment_repository.save(reply)

            if not await self.comment_repository.append_child(parent.id, saved.id):
                # Parent vanished between the read and the append
                raise NotFoundError("Comment", str(parent_comment_id))

            logfire.info(
                "Reply created",
                comment_id=str(saved.id),
                parent_comment_id=str(parent_comment_id),
                blog_id=str(blog_id),
            )
            return saved

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_by_id", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def list_top_level(
        self, blog_id: BlogId, skip: int = 0, limit: int = 5
    ) -> list[Comment]:
        """List top-level comments of a blog, newest first."""
        with logfire.span(
            "comment_service.list_top_level",
            blog_id=str(blog_id),
            skip=skip,
            limit=limit,
        ):
            comments = await self.comment_repository.find_top_level(
                blog_id, skip=max(skip, 0), limit=limit
            )
            logfire.info(
                "Top-level comments retrieved",
                blog_id=str(blog_id),
                count=len(comments),
            )
            return comments

    async def list_replies(
        self, parent_comment_id: CommentId, skip: int = 0, limit: int = 5
    ) -> list[Comment]:
        """List direct replies to a comment, newest first.

        Raises:
            NotFoundError: If the parent does not exist
        """
        with logfire.span(
            "comment_service.list_replies",
            parent_comment_id=str(parent_comment_id),
            skip=skip,
            limit=limit,
        ):
            await self.get_by_id(parent_comment_id)
            replies = await self.comment_repository.find_replies(
                parent_comment_id, skip=max(skip, 0), limit=limit
            )
            logfire.info(
                "Replies retrieved",
                parent_comment_id=str(parent_comment_id),
                count=len(replies),
            )
            return replies

    async def delete_recursive(self, comment_id: CommentId) -> CascadeDeletion:
        """Delete a comment together with every descendant.

        Descendants are collected with an explicit worklist that row-locks
        each node before reading its children. The root is then pruned from
        its parent's child_ids and all collected nodes are removed in one
        statement. Callers run this inside a single transaction so the
        cascade is all-or-nothing.

        Args:
            comment_id: Root of the subtree to delete

        Returns:
            The removed nodes and the blog/parent they were attached to

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.delete_recursive", comment_id=str(comment_id)
        ):
            root = await self.comment_repository.find_by_id_for_update(comment_id)
            if root is None:
                raise NotFoundError("Comment", str(comment_id))
            cascade = CascadeDeletion(root=root)

            # Each node is locked before its children are read; a reply racing
            # the cascade either commits first and is collected, or finds its
            # parent gone once the delete commits.
            seen: set[CommentId] = set()
            queue: deque[CommentId] = deque([root.id])
            while queue:
                node_id = queue.popleft()
                if node_id in seen:
                    continue
                seen.add(node_id)
                node = (
                    root
                    if node_id == root.id
                    else await self.comment_repository.find_by_id_for_update(node_id)
                )
                if node is None:
                    continue
                cascade.deleted.append(node)
                queue.extend(
                    child.id
                    for child in await self.comment_repository.find_children(node.id)
                )

            if root.parent_comment_id is not None:
                await self.comment_repository.remove_child(
                    root.parent_comment_id, root.id
                )

            removed = await self.comment_repository.delete_many(
                [node.id for node in cascade.deleted]
            )
            logfire.info(
                "Comment subtree deleted",
                comment_id=str(comment_id),
                blog_id=str(root.blog_id),
                deleted=removed,
            )
            return cascade

    @staticmethod
    def _clean_body(body: str) -> str:
        body = body.strip()
        if not body:
            raise ValidationError("Comment body must not be empty")
        if len(body) > 10000:
            raise ValidationError("Comment body must be at most 10000 characters")
        return body
