"""Unit tests for DeleteCommentUseCase."""

from uuid import UUID, uuid4

import pytest

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from inkwell.domain.error import NotAuthorizedError, NotFoundError
from inkwell.domain.repository import (
    BlogRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from inkwell.domain.value import CommentId, UserId
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _thread(unit_env):
    """Blog by U1, top-level comment by U2, reply by U3."""
    user_repo = await unit_env.get(UserRepository)
    blog_repo = await unit_env.get(BlogRepository)
    create = await unit_env.get(CreateCommentUseCase)
    u1 = await user_repo.save(make_user("u1"))
    u2, u3 = UserId(uuid4()), UserId(uuid4())
    blog = await blog_repo.save(make_blog(u1.id))
    top = await create.execute(
        CreateCommentRequest(blog_id=str(blog.id), body="nice post", author_id=str(u2))
    )
    reply = await create.execute(
        CreateCommentRequest(
            blog_id=str(blog.id),
            body="thanks",
            author_id=str(u3),
            parent_comment_id=top.comment_id,
        )
    )
    return blog, top, reply, u2, u3


class TestDeleteComment:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_top_level_reverses_everything(self, unit_env):
        """Deleting the thread root removes the reply, both counters and notifications."""
        # Arrange
        blog, top, reply, u2, u3 = await _thread(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=top.comment_id, caller_id=str(u2))
        )

        # Assert
        assert response.status == "done"
        assert response.deleted_count == 2
        assert set(response.deleted_ids) == {top.comment_id, reply.comment_id}
        for comment_id in (top.comment_id, reply.comment_id):
            assert await comment_repo.find_by_id(CommentId(UUID(comment_id))) is None

        updated = await blog_repo.find_by_id(blog.id)
        assert updated.total_comments == 0
        assert updated.total_parent_comments == 0

        assert await notification_repo.find_feed(blog.author_id) == []
        assert await notification_repo.find_feed(u2) == []

    @pytest.mark.asyncio
    async def test_delete_reply_keeps_parent_counter(self, unit_env):
        """Deleting a reply prunes it from the parent and leaves total_parent_comments."""
        blog, top, reply, u2, u3 = await _thread(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=reply.comment_id, caller_id=str(u3))
        )

        assert response.deleted_count == 1
        parent = await comment_repo.find_by_id(CommentId(UUID(top.comment_id)))
        assert parent.child_ids == []
        updated = await blog_repo.find_by_id(blog.id)
        assert updated.total_comments == 1
        assert updated.total_parent_comments == 1

    @pytest.mark.asyncio
    async def test_deep_thread_removes_all_descendants(self, unit_env):
        """N descendants plus the root are removed and no child_ids keep their ids."""
        blog, top, reply, u2, u3 = await _thread(unit_env)
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(DeleteCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        survivor = await create.execute(
            CreateCommentRequest(
                blog_id=str(blog.id), body="unrelated", author_id=str(uuid4())
            )
        )
        parent_id = reply.comment_id
        for i in range(5):
            nested = await create.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id),
                    body=f"level {i}",
                    author_id=str(uuid4()),
                    parent_comment_id=parent_id,
                )
            )
            parent_id = nested.comment_id

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=top.comment_id, caller_id=str(u2))
        )

        assert response.deleted_count == 7
        remaining = await comment_repo.find_top_level(blog.id, limit=50)
        assert [str(c.id) for c in remaining] == [survivor.comment_id]
        deleted = set(response.deleted_ids)
        for comment in remaining:
            assert not deleted & {str(cid) for cid in comment.child_ids}
        updated = await blog_repo.find_by_id(blog.id)
        assert updated.total_comments == 1
        assert updated.total_parent_comments == 1

    @pytest.mark.asyncio
    async def test_blog_author_may_delete_any_comment(self, unit_env):
        blog, top, reply, u2, u3 = await _thread(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)

        response = await use_case.execute(
            DeleteCommentRequest(
                comment_id=reply.comment_id, caller_id=str(blog.author_id)
            )
        )

        assert response.deleted_count == 1

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        blog, top, reply, u2, u3 = await _thread(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=top.comment_id, caller_id=str(u3))
            )

        assert await comment_repo.find_by_id(CommentId(UUID(top.comment_id)))

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(uuid4()), caller_id=str(uuid4()))
            )
