"""Unit tests for the read-only user use cases."""

from uuid import UUID, uuid4

import pytest

from agora.application.usecase.auth import RegisterUserRequest, RegisterUserUseCase
from agora.application.usecase.user import (
    FindUserByEmailRequest,
    FindUserByEmailUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListUsersRequest,
    ListUsersUseCase,
)
from agora.domain.error import NotFoundError
from agora.domain.model import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(env, username: str):
    register = await env.get(RegisterUserUseCase)
    return await register.execute(
        RegisterUserRequest(
            username=username, email=f"{username}@x.com", password="abc12345"
        )
    )


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_username(self, unit_env):
        """Should raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(username="ghost"))

    @pytest.mark.asyncio
    async def test_overlong_username_is_not_found(self, unit_env):
        """Should treat a username no account can have as not found."""
        # Arrange
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(username="x" * 40))

    @pytest.mark.asyncio
    async def test_profile_has_no_password(self, unit_env):
        """Should return the profile without credentials."""
        # Arrange
        user = await _register(unit_env, "ana")
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act
        profile = await use_case.execute(GetUserProfileRequest(username="ana"))

        # Assert
        assert profile.user.id == user.id
        assert "password_hash" not in profile.model_dump()["user"]
        assert profile.posts == []
        assert profile.saved_posts == []


class TestListUsersUseCase:
    """Tests for ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_lists_by_popularity(self, unit_env):
        """Should put the user with the best post first."""
        # Arrange
        quiet = await _register(unit_env, "quiet")
        star = await _register(unit_env, "star")
        posts = await unit_env.get(PostRepository)
        await posts.save(
            Post(
                id=PostId(uuid4()),
                user_id=UserId(UUID(star.id)),
                title="Viral",
                content="...",
                points=42,
            )
        )
        use_case = await unit_env.get(ListUsersUseCase)

        # Act
        response = await use_case.execute(ListUsersRequest())

        # Assert
        assert [entry.user.id for entry in response.users] == [star.id, quiet.id]
        assert response.users[0].posts[0].points == 42


class TestFindUserByEmailUseCase:
    """Tests for FindUserByEmailUseCase."""

    @pytest.mark.asyncio
    async def test_exact_match(self, unit_env):
        """Should return the single user with that email."""
        # Arrange
        user = await _register(unit_env, "ana")
        use_case = await unit_env.get(FindUserByEmailUseCase)

        # Act
        response = await use_case.execute(FindUserByEmailRequest(email="ana@x.com"))

        # Assert
        assert response.user.id == user.id

    @pytest.mark.asyncio
    async def test_no_match(self, unit_env):
        """Should return None instead of raising."""
        # Arrange
        await _register(unit_env, "ana")
        use_case = await unit_env.get(FindUserByEmailUseCase)

        # Act
        missing = await use_case.execute(FindUserByEmailRequest(email="bo@x.com"))
        invalid = await use_case.execute(FindUserByEmailRequest(email="not-an-email"))

        # Assert
        assert missing.user is None
        assert invalid.user is None
