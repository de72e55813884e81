"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from inkwell.domain.model import Notification
from inkwell.domain.repository import NotificationRepository
from inkwell.domain.service import NotificationService
from inkwell.domain.value import (
    BlogId,
    CommentId,
    NotificationFilter,
    NotificationId,
    NotificationType,
    UserId,
)
from tests.conftest import at
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _notification(recipient_id, actor_id, minutes, **overrides) -> Notification:
    fields = {
        "id": NotificationId(uuid4()),
        "type": NotificationType.COMMENT,
        "blog_id": BlogId(uuid4()),
        "recipient_id": recipient_id,
        "actor_id": actor_id,
        "comment_id": CommentId(uuid4()),
        "created_at": at(minutes),
    }
    fields.update(overrides)
    return Notification(**fields)


class TestNotifyComment:
    """Tests for notify_comment."""

    @pytest.mark.asyncio
    async def test_creates_unseen_comment_record(self, unit_env):
        service = await unit_env.get(NotificationService)
        blog_id, recipient, actor = BlogId(uuid4()), UserId(uuid4()), UserId(uuid4())
        comment_id = CommentId(uuid4())

        notification = await service.notify_comment(
            blog_id=blog_id, recipient_id=recipient, actor_id=actor, comment_id=comment_id
        )

        assert notification.type == NotificationType.COMMENT
        assert notification.recipient_id == recipient
        assert notification.comment_id == comment_id
        assert notification.seen is False

    @pytest.mark.asyncio
    async def test_same_id_stored_once(self, unit_env):
        """Re-applying a notification write with the same id keeps one record."""
        service = await unit_env.get(NotificationService)
        recipient = UserId(uuid4())
        notification_id = NotificationId(uuid4())
        kwargs = {
            "blog_id": BlogId(uuid4()),
            "recipient_id": recipient,
            "actor_id": UserId(uuid4()),
            "comment_id": CommentId(uuid4()),
            "notification_id": notification_id,
        }

        await service.notify_comment(**kwargs)
        await service.notify_comment(**kwargs)

        assert await service.count_feed(recipient) == 1


class TestNotifyReply:
    """Tests for notify_reply."""

    @pytest.mark.asyncio
    async def test_recipient_is_parent_author(self, unit_env):
        """Replies notify the author of the comment replied to, not the blog author."""
        service = await unit_env.get(NotificationService)
        blog_author, parent_author, actor = (UserId(uuid4()) for _ in range(3))
        parent_id, reply_id = CommentId(uuid4()), CommentId(uuid4())

        notification = await service.notify_reply(
            blog_id=BlogId(uuid4()),
            recipient_hint=blog_author,
            actor_id=actor,
            comment_id=reply_id,
            parent_comment_id=parent_id,
            parent_author_id=parent_author,
        )

        assert notification.type == NotificationType.REPLY
        assert notification.recipient_id == parent_author
        assert notification.comment_id == reply_id
        assert notification.replied_on_comment_id == parent_id

    @pytest.mark.asyncio
    async def test_attaches_reply_to_in_flight_notification(self, unit_env):
        """Answering from a notification sets reply_id on that notification."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        blog_author, commenter = UserId(uuid4()), UserId(uuid4())
        blog_id, comment_id = BlogId(uuid4()), CommentId(uuid4())
        original = await service.notify_comment(
            blog_id=blog_id, recipient_id=blog_author, actor_id=commenter, comment_id=comment_id
        )
        reply_id = CommentId(uuid4())

        await service.notify_reply(
            blog_id=blog_id,
            recipient_hint=blog_author,
            actor_id=blog_author,
            comment_id=reply_id,
            parent_comment_id=comment_id,
            parent_author_id=commenter,
            update_notification_id=original.id,
        )

        updated = await repo.find_by_id(original.id)
        assert updated.reply_id == reply_id


class TestLikes:
    """Tests for notify_like / retract_like / is_liked."""

    @pytest.mark.asyncio
    async def test_like_is_recorded_once(self, unit_env):
        service = await unit_env.get(NotificationService)
        blog_id, author, actor = BlogId(uuid4()), UserId(uuid4()), UserId(uuid4())

        first = await service.notify_like(blog_id, author, actor)
        second = await service.notify_like(blog_id, author, actor)

        assert first is True
        assert second is False
        assert await service.is_liked(blog_id, actor)
        assert await service.count_feed(author, NotificationFilter.LIKE) == 1

    @pytest.mark.asyncio
    async def test_retract_removes_like(self, unit_env):
        service = await unit_env.get(NotificationService)
        blog_id, author, actor = BlogId(uuid4()), UserId(uuid4()), UserId(uuid4())
        await service.notify_like(blog_id, author, actor)

        assert await service.retract_like(blog_id, actor) is True
        assert await service.retract_like(blog_id, actor) is False
        assert not await service.is_liked(blog_id, actor)


class TestDeleteForComment:
    """Tests for delete_for_comment."""

    @pytest.mark.asyncio
    async def test_deletes_records_and_unlinks_replies(self, unit_env):
        """Records about the comment go away; records answered by it are kept unlinked."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        blog_author, commenter = UserId(uuid4()), UserId(uuid4())
        blog_id = BlogId(uuid4())
        comment_id = CommentId(uuid4())
        reply_id = CommentId(uuid4())

        comment_record = await service.notify_comment(
            blog_id=blog_id, recipient_id=blog_author, actor_id=commenter, comment_id=comment_id
        )
        reply_record = await service.notify_reply(
            blog_id=blog_id,
            recipient_hint=blog_author,
            actor_id=blog_author,
            comment_id=reply_id,
            parent_comment_id=comment_id,
            parent_author_id=commenter,
            update_notification_id=comment_record.id,
        )

        deleted, cleared = await service.delete_for_comment(reply_id)

        assert (deleted, cleared) == (1, 1)
        assert await repo.find_by_id(reply_record.id) is None
        kept = await repo.find_by_id(comment_record.id)
        assert kept is not None
        assert kept.reply_id is None


class TestFeed:
    """Tests for list_feed, count_feed and has_unseen."""

    @pytest.mark.asyncio
    async def test_feed_newest_first_and_excludes_self(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        me, other = UserId(uuid4()), UserId(uuid4())
        older = await repo.save(_notification(me, other, 1))
        newer = await repo.save(_notification(me, other, 2))
        await repo.save(_notification(me, me, 3))  # my own action

        feed = await service.list_feed(me)

        assert [n.id for n in feed] == [newer.id, older.id]
        assert await service.count_feed(me) == 2

    @pytest.mark.asyncio
    async def test_listing_marks_page_seen(self, unit_env):
        """A read returns the pre-read flags, then the page is seen."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        me, other = UserId(uuid4()), UserId(uuid4())
        for minutes in range(3):
            await repo.save(_notification(me, other, minutes))

        assert await service.has_unseen(me) is True

        first_read = await service.list_feed(me, limit=10)
        second_read = await service.list_feed(me, limit=10)

        assert all(not n.seen for n in first_read)
        assert all(n.seen for n in second_read)
        assert await service.has_unseen(me) is False

    @pytest.mark.asyncio
    async def test_only_listed_page_marked_seen(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        me, other = UserId(uuid4()), UserId(uuid4())
        oldest = await repo.save(_notification(me, other, 0))
        await repo.save(_notification(me, other, 1))
        await repo.save(_notification(me, other, 2))

        await service.list_feed(me, skip=0, limit=2)

        assert (await repo.find_by_id(oldest.id)).seen is False
        assert await service.has_unseen(me) is True

    @pytest.mark.asyncio
    async def test_self_notification_never_unseen(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        me = UserId(uuid4())
        await repo.save(_notification(me, me, 0))

        assert await service.has_unseen(me) is False

    @pytest.mark.asyncio
    async def test_filter_restricts_type(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        me, other = UserId(uuid4()), UserId(uuid4())
        await repo.save(_notification(me, other, 0))
        await repo.save(
            _notification(me, other, 1, type=NotificationType.LIKE, comment_id=None)
        )

        likes = await service.list_feed(me, NotificationFilter.LIKE)
        comments = await service.list_feed(me, NotificationFilter.COMMENT)

        assert [n.type for n in likes] == [NotificationType.LIKE]
        assert [n.type for n in comments] == [NotificationType.COMMENT]
        assert await service.count_feed(me, NotificationFilter.REPLY) == 0
