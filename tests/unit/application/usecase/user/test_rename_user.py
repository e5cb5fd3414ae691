"""Unit tests for RenameUserUseCase."""

import pytest
from pydantic import ValidationError

from udiddit.application.usecase.user import RenameUserRequest, RenameUserUseCase
from udiddit.domain.error import NotFoundError
from udiddit.domain.service import UserService
from udiddit.domain.value import Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRenameUserUseCase:
    """Tests for RenameUserUseCase."""

    @pytest.mark.asyncio
    async def test_rename_returns_new_name(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(RenameUserUseCase)
        user = await user_service.register_user(Username("alice"))

        response = await use_case.execute(
            RenameUserRequest(user_id=user.id, username="alicia")
        )

        assert response.user_id == user.id
        assert response.username == "alicia"
        assert response.username_updated is not None

    @pytest.mark.asyncio
    async def test_overlong_username_is_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(RenameUserUseCase)
        user = await user_service.register_user(Username("alice"))

        with pytest.raises(ValidationError):
            await use_case.execute(
                RenameUserRequest(user_id=user.id, username="a" * 26)
            )

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(RenameUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(RenameUserRequest(user_id=1, username="bob"))
