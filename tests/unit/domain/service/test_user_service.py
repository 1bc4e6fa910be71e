"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from deck.domain.error import UnauthorizedError
from deck.domain.repository import UserRepository
from deck.domain.service import UserService
from deck.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUserService:
    """Tests for principal resolution and author display."""

    @pytest.mark.asyncio
    async def test_require_user_returns_known_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await make_user(await unit_env.get(UserRepository), "Ada")

        result = await user_service.require_user(user.id)

        assert result == user

    @pytest.mark.asyncio
    async def test_require_user_unknown_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(UnauthorizedError):
            await user_service.require_user(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_author_displays_fall_back_to_anonymous(self, unit_env):
        """Authors missing from the directory still get a display entry."""
        user_service = await unit_env.get(UserService)
        user = await make_user(await unit_env.get(UserRepository), "grace")
        ghost_id = UserId(uuid4())

        displays = await user_service.get_author_displays([user.id, ghost_id, user.id])

        assert displays[user.id].name == "grace"
        assert displays[user.id].initial == "G"
        assert displays[ghost_id].name == "Anonymous"
        assert displays[ghost_id].initial == "A"

    @pytest.mark.asyncio
    async def test_author_displays_empty(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_author_displays([]) == {}
