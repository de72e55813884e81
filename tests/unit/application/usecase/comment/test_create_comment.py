"""Unit tests for CreateCommentUseCase."""

from uuid import UUID, uuid4

import pytest

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.repository import (
    BlogRepository,
    CommentRepository,
    FollowUpRepository,
    NotificationRepository,
    UserRepository,
)
from inkwell.domain.value import CommentId, FollowUpStatus, NotificationType, UserId
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_blog(unit_env, **overrides):
    user_repo = await unit_env.get(UserRepository)
    blog_repo = await unit_env.get(BlogRepository)
    author = await user_repo.save(make_user("blogger"))
    return await blog_repo.save(make_blog(author.id, **overrides))


class TestCreateTopLevelComment:
    """Commenting directly on a blog."""

    @pytest.mark.asyncio
    async def test_comment_counts_and_notifies_blog_author(self, unit_env):
        """New top-level comment moves both counters and notifies the blog author."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        blog = await _seed_blog(unit_env)
        actor = UserId(uuid4())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id),
                body="nice post",
                author_id=str(actor),
                blog_author_id=str(blog.author_id),
            )
        )

        # Assert
        assert response.comment_id
        assert response.body == "nice post"
        assert response.child_ids == []
        assert response.is_reply is False
        assert response.parent_comment_id is None

        updated = await blog_repo.find_by_id(blog.id)
        assert updated.total_comments == 1
        assert updated.total_parent_comments == 1

        feed = await notification_repo.find_feed(blog.author_id)
        assert len(feed) == 1
        assert feed[0].type == NotificationType.COMMENT
        assert feed[0].actor_id == actor
        assert str(feed[0].comment_id) == response.comment_id

    @pytest.mark.asyncio
    async def test_follow_ups_are_applied(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        follow_up_repo = await unit_env.get(FollowUpRepository)
        blog = await _seed_blog(unit_env)

        response = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id), body="hi", author_id=str(uuid4())
            )
        )

        notify = await follow_up_repo.find_by_key(f"{response.comment_id}:created:notify")
        assert notify.status == FollowUpStatus.APPLIED
        assert await follow_up_repo.find_pending() == []

    @pytest.mark.asyncio
    async def test_blog_author_commenting_gets_no_visible_notification(self, unit_env):
        """A notification about your own comment never shows in your feed."""
        use_case = await unit_env.get(CreateCommentUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        blog = await _seed_blog(unit_env)

        await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id), body="author here", author_id=str(blog.author_id)
            )
        )

        assert await notification_repo.find_feed(blog.author_id) == []
        assert await notification_repo.exists_unseen(blog.author_id) is False

    @pytest.mark.asyncio
    async def test_empty_body_rejected_without_side_effects(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await _seed_blog(unit_env)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id), body="   ", author_id=str(uuid4())
                )
            )

        assert await comment_repo.count_by_blog(blog.id) == 0
        assert (await blog_repo.find_by_id(blog.id)).total_comments == 0

    @pytest.mark.asyncio
    async def test_unknown_blog_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(uuid4()), body="hello", author_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_draft_blog_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        blog = await _seed_blog(unit_env, draft=True, published_at=None)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id), body="hello", author_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_mismatched_blog_author_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        blog = await _seed_blog(unit_env)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id),
                    body="hello",
                    author_id=str(uuid4()),
                    blog_author_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["blog_author_id", "notification_id"])
    async def test_malformed_optional_id_rejected(self, unit_env, field):
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await _seed_blog(unit_env)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id),
                    body="hello",
                    author_id=str(uuid4()),
                    **{field: "not-a-uuid"},
                )
            )

        assert await comment_repo.count_by_blog(blog.id) == 0


class TestCreateReply:
    """Replying to an existing comment."""

    @pytest.mark.asyncio
    async def test_reply_links_counts_and_notifies_parent_author(self, unit_env):
        """Replies move total_comments only and notify the parent comment's author."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        blog = await _seed_blog(unit_env)
        commenter, replier = UserId(uuid4()), UserId(uuid4())
        top = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id), body="nice post", author_id=str(commenter)
            )
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id),
                body="agreed",
                author_id=str(replier),
                parent_comment_id=top.comment_id,
            )
        )

        # Assert
        assert reply.is_reply is True
        assert reply.parent_comment_id == top.comment_id
        parent = await comment_repo.find_by_id(CommentId(UUID(top.comment_id)))
        assert [str(cid) for cid in parent.child_ids] == [reply.comment_id]

        updated = await blog_repo.find_by_id(blog.id)
        assert updated.total_comments == 2
        assert updated.total_parent_comments == 1

        replies = await notification_repo.find_feed(
            commenter, type=NotificationType.REPLY
        )
        assert len(replies) == 1
        assert replies[0].actor_id == replier
        assert str(replies[0].replied_on_comment_id) == top.comment_id

    @pytest.mark.asyncio
    async def test_reply_from_notification_links_it(self, unit_env):
        """Answering from a notification records the reply on that notification."""
        use_case = await unit_env.get(CreateCommentUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        blog = await _seed_blog(unit_env)
        top = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id), body="question?", author_id=str(uuid4())
            )
        )
        [incoming] = await notification_repo.find_feed(blog.author_id)

        reply = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id),
                body="answer",
                author_id=str(blog.author_id),
                parent_comment_id=top.comment_id,
                notification_id=str(incoming.id),
            )
        )

        linked = await notification_repo.find_by_id(incoming.id)
        assert str(linked.reply_id) == reply.comment_id

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await _seed_blog(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id),
                    body="orphan",
                    author_id=str(uuid4()),
                    parent_comment_id=str(uuid4()),
                )
            )

        assert (await blog_repo.find_by_id(blog.id)).total_comments == 0

    @pytest.mark.asyncio
    async def test_malformed_parent_id_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        blog = await _seed_blog(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id),
                    body="orphan",
                    author_id=str(uuid4()),
                    parent_comment_id="not-a-uuid",
                )
            )

        assert await comment_repo.count_by_blog(blog.id) == 0

    @pytest.mark.asyncio
    async def test_total_comments_counts_every_node(self, unit_env):
        """After K top-level comments and M replies total_comments is K + M."""
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await _seed_blog(unit_env)

        tops = [
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id), body=f"top {i}", author_id=str(uuid4())
                )
            )
            for i in range(3)
        ]
        parent_id = tops[0].comment_id
        for i in range(4):
            reply = await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id),
                    body=f"reply {i}",
                    author_id=str(uuid4()),
                    parent_comment_id=parent_id,
                )
            )
            parent_id = reply.comment_id

        updated = await blog_repo.find_by_id(blog.id)
        assert updated.total_comments == 7
        assert updated.total_parent_comments == 3
