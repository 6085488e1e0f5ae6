"""Tests for profile use cases."""

import pytest

from duo.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from duo.domain.error import NotFoundError
from duo.domain.repository import UnitOfWork
from tests.factories import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_first_update_creates_profile(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)
        user_id = new_user_id()

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(
                user_id=str(user_id),
                user_email="Alice@Example.com",
                full_name="Alice",
            )
        )

        # Assert
        assert response.user_id == str(user_id)
        assert response.email == "alice@example.com"
        assert response.full_name == "Alice"
        assert response.bio is None
        assert response.couple_id is None
        assert (await unit_env.get(UnitOfWork)).commits == 1

    @pytest.mark.asyncio
    async def test_unset_fields_are_kept(self, unit_env):
        """Only fields present in the request change."""
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)
        user_id = str(new_user_id())
        await use_case.execute(
            UpdateProfileRequest(
                user_id=user_id, user_email="alice@example.com", full_name="Alice"
            )
        )

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(
                user_id=user_id, user_email="alice@example.com", bio="Loves hiking"
            )
        )

        # Assert
        assert response.full_name == "Alice"
        assert response.bio == "Loves hiking"

    @pytest.mark.asyncio
    async def test_explicit_null_clears_field(self, unit_env):
        use_case = await unit_env.get(UpdateProfileUseCase)
        user_id = str(new_user_id())
        await use_case.execute(
            UpdateProfileRequest(user_id=user_id, user_email="a@example.com", bio="Hi")
        )

        response = await use_case.execute(
            UpdateProfileRequest(user_id=user_id, user_email="a@example.com", bio=None)
        )

        assert response.bio is None

    def test_bio_max_length(self):
        with pytest.raises(ValueError):
            UpdateProfileRequest(
                user_id=str(new_user_id()), user_email="a@example.com", bio="a" * 501
            )


class TestGetProfileUseCase:
    """Tests for GetProfileUseCase."""

    @pytest.mark.asyncio
    async def test_missing_profile(self, unit_env):
        use_case = await unit_env.get(GetProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetProfileRequest(user_id=str(new_user_id())))
