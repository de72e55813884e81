"""Unit tests for GetUserProfileUseCase."""

import pytest

from inkwell.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
)
from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import CounterField
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUserProfile:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_returns_public_fields_and_counters(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(
            make_user("ada", email="ada@example.com", bio="Writes about engines")
        )
        await user_repo.apply_delta(user.id, CounterField.TOTAL_POSTS, 2)
        await user_repo.apply_delta(user.id, CounterField.TOTAL_READS, 40)

        # Act
        profile = await use_case.execute(GetUserProfileRequest(username="ada"))

        # Assert
        assert profile.user_id == str(user.id)
        assert profile.fullname == "Ada"
        assert profile.bio == "Writes about engines"
        assert (profile.total_posts, profile.total_reads) == (2, 40)
        assert profile.joined_at == user.created_at
        assert "email" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_unknown_username_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(username="ghost"))
