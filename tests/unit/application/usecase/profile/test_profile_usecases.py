"""Unit tests for profile use cases."""

import pytest

from scribe.application.usecase.profile import (
    EnsureProfileRequest,
    EnsureProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProfileUseCases:
    """Tests for the profile flows."""

    @pytest.mark.asyncio
    async def test_get_profile_absent_returns_none(self, unit_env, user_id):
        get_profile = await unit_env.get(GetProfileUseCase)

        assert await get_profile.execute(GetProfileRequest(user_id=str(user_id))) is None

    @pytest.mark.asyncio
    async def test_ensure_then_upsert(self, unit_env, user_id):
        # Arrange
        ensure = await unit_env.get(EnsureProfileUseCase)
        upsert = await unit_env.get(UpsertProfileUseCase)
        get_profile = await unit_env.get(GetProfileUseCase)

        # Act
        skipped = await ensure.execute(EnsureProfileRequest(user_id=str(user_id)))
        created = await ensure.execute(
            EnsureProfileRequest(user_id=str(user_id), name="Linus")
        )
        renamed = await upsert.execute(
            UpsertProfileRequest(user_id=str(user_id), name="Linus T.")
        )
        fetched = await get_profile.execute(GetProfileRequest(user_id=str(user_id)))

        # Assert
        assert skipped is None
        assert created.name == "Linus"
        assert renamed.profile_id == created.profile_id
        assert fetched.name == "Linus T."
        assert fetched.user_id == str(user_id)
