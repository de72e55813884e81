"""Unit tests for LedgerService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import ValidationError
from inkwell.domain.repository import BlogRepository, UserRepository
from inkwell.domain.service import LedgerService
from inkwell.domain.value import CounterField, EntityRef, UserId
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestApplyDelta:
    """Tests for apply_delta."""

    @pytest.mark.asyncio
    async def test_moves_blog_counter(self, unit_env):
        ledger = await unit_env.get(LedgerService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog(UserId(uuid4())))

        assert await ledger.apply_delta(
            EntityRef.blog(blog.id), CounterField.TOTAL_COMMENTS, 1
        )
        assert await ledger.apply_delta(
            EntityRef.blog(blog.id), CounterField.TOTAL_COMMENTS, 1
        )

        updated = await blog_repo.find_by_id(blog.id)
        assert updated.total_comments == 2
        assert updated.total_likes == 0

    @pytest.mark.asyncio
    async def test_moves_user_counter(self, unit_env):
        ledger = await unit_env.get(LedgerService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        await ledger.apply_delta(EntityRef.user(user.id), CounterField.TOTAL_READS, 3)

        updated = await user_repo.find_by_id(user.id)
        assert updated.total_reads == 3

    @pytest.mark.asyncio
    async def test_counter_never_goes_negative(self, unit_env):
        """A decrement below zero stops at zero."""
        ledger = await unit_env.get(LedgerService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog(UserId(uuid4()), total_likes=1))

        await ledger.apply_delta(EntityRef.blog(blog.id), CounterField.TOTAL_LIKES, -1)
        await ledger.apply_delta(EntityRef.blog(blog.id), CounterField.TOTAL_LIKES, -1)

        updated = await blog_repo.find_by_id(blog.id)
        assert updated.total_likes == 0

    @pytest.mark.asyncio
    async def test_missing_entity_returns_false(self, unit_env):
        ledger = await unit_env.get(LedgerService)

        updated = await ledger.apply_delta(
            EntityRef.user(uuid4()), CounterField.TOTAL_POSTS, 1
        )

        assert updated is False

    @pytest.mark.asyncio
    async def test_counter_not_owned_by_entity_rejected(self, unit_env):
        """Users have no total_likes counter."""
        ledger = await unit_env.get(LedgerService)

        with pytest.raises(ValidationError):
            await ledger.apply_delta(
                EntityRef.user(uuid4()), CounterField.TOTAL_LIKES, 1
            )

    @pytest.mark.asyncio
    async def test_zero_delta_is_noop(self, unit_env):
        ledger = await unit_env.get(LedgerService)

        assert await ledger.apply_delta(
            EntityRef.blog(uuid4()), CounterField.TOTAL_READS, 0
        )
