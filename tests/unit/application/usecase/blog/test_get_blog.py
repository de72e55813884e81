"""Unit tests for GetBlogUseCase."""

import pytest

from inkwell.application.usecase.blog import GetBlogRequest, GetBlogUseCase
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.repository import BlogRepository, UserRepository
from inkwell.domain.value import BlogMode
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetBlog:
    """Tests for GetBlogUseCase."""

    @pytest.mark.asyncio
    async def test_read_counts_on_blog_and_author(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await user_repo.save(make_user("author"))
        blog = await blog_repo.save(make_blog(author.id))

        # Act
        response = await use_case.execute(GetBlogRequest(slug=blog.slug.root))
        await use_case.execute(GetBlogRequest(slug=blog.slug.root))

        # Assert
        assert response.title == blog.title
        assert response.author.username == "author"
        assert response.tags == ["python"]
        assert (await blog_repo.find_by_id(blog.id)).total_reads == 2
        assert (await user_repo.find_by_id(author.id)).total_reads == 2

    @pytest.mark.asyncio
    async def test_edit_mode_does_not_count_read(self, unit_env):
        use_case = await unit_env.get(GetBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await user_repo.save(make_user("author"))
        blog = await blog_repo.save(make_blog(author.id))

        await use_case.execute(
            GetBlogRequest(
                slug=blog.slug.root, caller_id=str(author.id), mode=BlogMode.EDIT
            )
        )

        assert (await blog_repo.find_by_id(blog.id)).total_reads == 0
        assert (await user_repo.find_by_id(author.id)).total_reads == 0

    @pytest.mark.asyncio
    async def test_draft_visible_to_author_only(self, unit_env):
        use_case = await unit_env.get(GetBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await user_repo.save(make_user("author"))
        reader = await user_repo.save(make_user("reader"))
        draft = await blog_repo.save(
            make_blog(author.id, draft=True, published_at=None)
        )

        own = await use_case.execute(
            GetBlogRequest(slug=draft.slug.root, caller_id=str(author.id))
        )
        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetBlogRequest(slug=draft.slug.root, caller_id=str(reader.id))
            )
        with pytest.raises(NotFoundError):
            await use_case.execute(GetBlogRequest(slug=draft.slug.root))

        assert own.draft is True
        assert (await blog_repo.find_by_id(draft.id)).total_reads == 0

    @pytest.mark.asyncio
    async def test_unknown_slug(self, unit_env):
        use_case = await unit_env.get(GetBlogUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetBlogRequest(slug="no-such-blog"))

    @pytest.mark.asyncio
    async def test_malformed_slug(self, unit_env):
        use_case = await unit_env.get(GetBlogUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(GetBlogRequest(slug="Not A Slug!"))
