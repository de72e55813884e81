"""Unit tests for LikeBlogUseCase and IsLikedUseCase."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.blog import (
    IsLikedRequest,
    IsLikedUseCase,
    LikeBlogRequest,
    LikeBlogUseCase,
)
from inkwell.application.usecase.notification import (
    CountNotificationsRequest,
    CountNotificationsUseCase,
)
from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import BlogRepository, UserRepository
from inkwell.domain.value import BlogId, NotificationFilter
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(unit_env):
    user_repo = await unit_env.get(UserRepository)
    blog_repo = await unit_env.get(BlogRepository)
    author = await user_repo.save(make_user("author"))
    reader = await user_repo.save(make_user("reader"))
    blog = await blog_repo.save(make_blog(author.id))
    return author, reader, blog, blog_repo


class TestLikeBlog:
    """Tests for LikeBlogUseCase."""

    @pytest.mark.asyncio
    async def test_like_notifies_author(self, unit_env):
        # Arrange
        use_case = await unit_env.get(LikeBlogUseCase)
        is_liked = await unit_env.get(IsLikedUseCase)
        count = await unit_env.get(CountNotificationsUseCase)
        author, reader, blog, blog_repo = await _setup(unit_env)

        # Act
        response = await use_case.execute(
            LikeBlogRequest(blog_id=str(blog.id), actor_id=str(reader.id))
        )

        # Assert
        assert response.liked_by_user is True
        assert response.changed is True
        assert (await blog_repo.find_by_id(blog.id)).total_likes == 1
        liked = await is_liked.execute(
            IsLikedRequest(blog_id=str(blog.id), actor_id=str(reader.id))
        )
        assert liked.liked_by_user is True
        likes = await count.execute(
            CountNotificationsRequest(
                recipient_id=str(author.id), filter=NotificationFilter.LIKE
            )
        )
        assert likes.total_docs == 1

    @pytest.mark.asyncio
    async def test_double_like_is_noop(self, unit_env):
        use_case = await unit_env.get(LikeBlogUseCase)
        _, reader, blog, blog_repo = await _setup(unit_env)
        request = LikeBlogRequest(blog_id=str(blog.id), actor_id=str(reader.id))

        await use_case.execute(request)
        again = await use_case.execute(request)

        assert again.changed is False
        assert (await blog_repo.find_by_id(blog.id)).total_likes == 1

    @pytest.mark.asyncio
    async def test_unlike_reverses_like(self, unit_env):
        use_case = await unit_env.get(LikeBlogUseCase)
        is_liked = await unit_env.get(IsLikedUseCase)
        count = await unit_env.get(CountNotificationsUseCase)
        author, reader, blog, blog_repo = await _setup(unit_env)

        await use_case.execute(
            LikeBlogRequest(blog_id=str(blog.id), actor_id=str(reader.id))
        )
        response = await use_case.execute(
            LikeBlogRequest(blog_id=str(blog.id), actor_id=str(reader.id), like=False)
        )

        assert response.liked_by_user is False
        assert response.changed is True
        assert (await blog_repo.find_by_id(blog.id)).total_likes == 0
        liked = await is_liked.execute(
            IsLikedRequest(blog_id=str(blog.id), actor_id=str(reader.id))
        )
        assert liked.liked_by_user is False
        total = await count.execute(CountNotificationsRequest(recipient_id=str(author.id)))
        assert total.total_docs == 0

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_noop(self, unit_env):
        use_case = await unit_env.get(LikeBlogUseCase)
        _, reader, blog, blog_repo = await _setup(unit_env)

        response = await use_case.execute(
            LikeBlogRequest(blog_id=str(blog.id), actor_id=str(reader.id), like=False)
        )

        assert response.changed is False
        assert (await blog_repo.find_by_id(blog.id)).total_likes == 0

    @pytest.mark.asyncio
    async def test_self_like_counts_without_notification(self, unit_env):
        use_case = await unit_env.get(LikeBlogUseCase)
        count = await unit_env.get(CountNotificationsUseCase)
        author, _, blog, blog_repo = await _setup(unit_env)

        await use_case.execute(
            LikeBlogRequest(blog_id=str(blog.id), actor_id=str(author.id))
        )

        assert (await blog_repo.find_by_id(blog.id)).total_likes == 1
        total = await count.execute(CountNotificationsRequest(recipient_id=str(author.id)))
        assert total.total_docs == 0

    @pytest.mark.asyncio
    async def test_draft_cannot_be_liked(self, unit_env):
        use_case = await unit_env.get(LikeBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await user_repo.save(make_user("author"))
        reader = await user_repo.save(make_user("reader"))
        draft = await blog_repo.save(make_blog(author.id, draft=True, published_at=None))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                LikeBlogRequest(blog_id=str(draft.id), actor_id=str(reader.id))
            )

    @pytest.mark.asyncio
    async def test_unknown_blog(self, unit_env):
        use_case = await unit_env.get(LikeBlogUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                LikeBlogRequest(blog_id=str(BlogId(uuid4())), actor_id=str(uuid4()))
            )
