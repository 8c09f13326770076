"""Unit tests for DeleteUserUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)
from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
)
from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
)
from agora.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from agora.domain.error import NotFoundError, UnauthorizedError
from agora.domain.repository import UserRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteUserUseCase:
    """Tests for the cascading account deletion."""

    async def _register(self, env, username: str) -> tuple[str, str]:
        """Register and log in, returning (user_id, token)."""
        register = await env.get(RegisterUserUseCase)
        login = await env.get(LoginUseCase)
        user = await register.execute(
            RegisterUserRequest(
                username=username, email=f"{username}@x.com", password="abc12345"
            )
        )
        session = await login.execute(
            LoginRequest(identifier=username, password="abc12345")
        )
        return user.id, session.token

    @pytest.mark.asyncio
    async def test_cascade_removes_everything_the_user_owns(self, unit_env):
        """Should delete the user, their posts and all dependent rows."""
        # Arrange
        ana_id, ana_token = await self._register(unit_env, "ana")
        bruno_id, bruno_token = await self._register(unit_env, "bruno")
        create_post = await unit_env.get(CreatePostUseCase)
        create_comment = await unit_env.get(CreateCommentUseCase)
        update_profile = await unit_env.get(UpdateUserProfileUseCase)

        ana_post = await create_post.execute(
            CreatePostRequest(user_id=ana_id, token=ana_token, title="Ana", content=".")
        )
        bruno_post = await create_post.execute(
            CreatePostRequest(
                user_id=bruno_id, token=bruno_token, title="Bruno", content="."
            )
        )
        on_ana_post = await create_comment.execute(
            CreateCommentRequest(post_id=ana_post.id, user_id=bruno_id, content="hi")
        )
        by_ana = await create_comment.execute(
            CreateCommentRequest(post_id=bruno_post.id, user_id=ana_id, content="yo")
        )
        await update_profile.execute(
            UpdateUserProfileRequest(
                user_id=bruno_id,
                token=bruno_token,
                saved_posts=[ana_post.id, bruno_post.id],
            )
        )
        use_case = await unit_env.get(DeleteUserUseCase)

        # Act
        response = await use_case.execute(
            DeleteUserRequest(user_id=ana_id, token=ana_token)
        )

        # Assert
        assert response.user.id == ana_id
        assert [p.id for p in response.posts] == [ana_post.id]

        get_post = await unit_env.get(GetPostUseCase)
        with pytest.raises(NotFoundError):
            await get_post.execute(GetPostRequest(post_id=ana_post.id))

        get_comment = await unit_env.get(GetCommentUseCase)
        for comment in (on_ana_post, by_ana):
            with pytest.raises(NotFoundError):
                await get_comment.execute(GetCommentRequest(comment_id=comment.id))

        profile = await unit_env.get(GetUserProfileUseCase)
        with pytest.raises(NotFoundError):
            await profile.execute(GetUserProfileRequest(username="ana"))

        bruno = await profile.execute(GetUserProfileRequest(username="bruno"))
        assert [p.id for p in bruno.saved_posts] == [bruno_post.id]
        assert bruno.user.saved_post_ids == [bruno_post.id]
        assert bruno.comments == []

    @pytest.mark.asyncio
    async def test_unauthorized_delete_changes_nothing(self, unit_env):
        """Should leave the user in place when the token is not theirs."""
        # Arrange
        ana_id, _ = await self._register(unit_env, "ana")
        _, bruno_token = await self._register(unit_env, "bruno")
        use_case = await unit_env.get(DeleteUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        with pytest.raises(UnauthorizedError):
            await use_case.execute(DeleteUserRequest(user_id=ana_id, token=bruno_token))

        # Assert
        assert len(await user_repo.find_all()) == 2

    @pytest.mark.asyncio
    async def test_missing_user_is_not_found(self, unit_env):
        """Should report NotFound before checking the token."""
        # Arrange
        use_case = await unit_env.get(DeleteUserUseCase)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteUserRequest(user_id=str(uuid4()), token=None))
