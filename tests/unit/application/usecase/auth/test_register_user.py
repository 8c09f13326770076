"""Unit tests for RegisterUserUseCase."""

import pytest

from agora.application.usecase.auth import RegisterUserRequest, RegisterUserUseCase
from agora.domain.error import DuplicateFieldError, ValidationError
from agora.domain.repository import UserRepository
from agora.domain.value import Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_user_without_password(self, unit_env):
        """Should create the account and never expose the password."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)

        # Act
        response = await use_case.execute(
            RegisterUserRequest(username="ana", email="ana@x.com", password="abc12345")
        )

        # Assert
        assert response.username == "ana"
        assert response.email == "ana@x.com"
        dumped = response.model_dump()
        assert "password" not in dumped
        assert "password_hash" not in dumped
        assert response.saved_post_ids == []

    @pytest.mark.asyncio
    async def test_stores_hash_not_plaintext(self, unit_env):
        """Should persist a bcrypt hash of the password."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        await use_case.execute(
            RegisterUserRequest(username="ana", email="ana@x.com", password="abc12345")
        )

        # Assert
        stored = await user_repo.find_by_username(Username("ana"))
        assert stored.password_hash != "abc12345"
        assert stored.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_username(self, unit_env):
        """Should reject a taken username."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(
            RegisterUserRequest(username="ana", email="ana@x.com", password="abc12345")
        )

        # Act / Assert
        with pytest.raises(DuplicateFieldError) as exc_info:
            await use_case.execute(
                RegisterUserRequest(
                    username="ana", email="other@x.com", password="xyz98765"
                )
            )

        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_username_wins_when_both_collide(self, unit_env):
        """Should report the username even if the email is also taken."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(
            RegisterUserRequest(username="ana", email="ana@x.com", password="abc12345")
        )

        # Act / Assert
        with pytest.raises(DuplicateFieldError) as exc_info:
            await use_case.execute(
                RegisterUserRequest(
                    username="ana", email="ana@x.com", password="xyz98765"
                )
            )

        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        """Should reject a taken email."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(
            RegisterUserRequest(username="ana", email="ana@x.com", password="abc12345")
        )

        # Act / Assert
        with pytest.raises(DuplicateFieldError) as exc_info:
            await use_case.execute(
                RegisterUserRequest(
                    username="bruno", email="ana@x.com", password="xyz98765"
                )
            )

        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_malformed_email_rejected(self, unit_env):
        """Should raise ValidationError before touching storage."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act / Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                RegisterUserRequest(
                    username="ana", email="not-an-email", password="abc12345"
                )
            )

        assert await user_repo.find_by_username(Username("ana")) is None
