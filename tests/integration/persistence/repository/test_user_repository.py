"""Integration tests for PostgresUserRepository.

These tests need a migrated PostgreSQL reachable at ``DATABASE__URL``.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy import select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from agora.domain.error import DuplicateFieldError
from agora.domain.model import Post, User
from agora.domain.repository import PostRepository, UserRepository
from agora.domain.value import Email, PostId, UserId, Username
from agora.persistence.tables import users_table
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def make_user() -> User:
    name = f"it{uuid4().hex[:12]}"
    return User(
        id=UserId(uuid4()),
        username=Username(name),
        email=Email(f"{name}@example.com"),
        password_hash="$2b$04$integrationtesthash",
    )


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_login(self, integration_env):
        """Should find the saved user by email and by username."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        user = await repo.save(make_user())

        # Act
        by_email = await repo.find_by_login(user.email.root)
        by_username = await repo.find_by_login(user.username.root)

        # Assert
        assert by_email.id == user.id
        assert by_username.id == user.id

    @pytest.mark.asyncio
    async def test_unique_username_surfaces_as_duplicate(self, integration_env):
        """Should map the username constraint to DuplicateFieldError."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        first = await repo.save(make_user())
        clash = make_user().model_copy(update={"username": first.username})

        # Act / Assert
        with pytest.raises(DuplicateFieldError) as exc_info:
            await repo.save(clash)

        assert exc_info.value.field == "username"
        # The transaction is still usable after the failed insert
        assert (await repo.find_by_id(first.id)).id == first.id

    @pytest.mark.asyncio
    async def test_unique_email_surfaces_as_duplicate(self, integration_env):
        """Should map the email constraint to DuplicateFieldError."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        first = await repo.save(make_user())
        clash = make_user().model_copy(update={"email": first.email})

        # Act / Assert
        with pytest.raises(DuplicateFieldError) as exc_info:
            await repo.save(clash)

        assert exc_info.value.field == "email"
        assert await repo.find_by_id(clash.id) is None

    @pytest.mark.asyncio
    async def test_find_for_update_locks_row(self, integration_env):
        """Should hold a row lock that other connections cannot take."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        session = await integration_env.get(AsyncSession)
        engine = await integration_env.get(AsyncEngine)
        user = await repo.save(make_user())
        await session.commit()

        # Act
        locked = await repo.find_by_id(user.id, for_update=True)

        # Assert
        assert locked.id == user.id
        async with engine.connect() as other:
            with pytest.raises(DBAPIError):
                await other.execute(
                    select(users_table.c.id)
                    .where(users_table.c.id == user.id)
                    .with_for_update(nowait=True)
                )

        await repo.delete(user.id)

    @pytest.mark.asyncio
    async def test_saved_posts_keep_order(self, integration_env):
        """Should store and reload saved posts in their given order."""
        # Arrange
        users = await integration_env.get(UserRepository)
        posts = await integration_env.get(PostRepository)
        owner = await users.save(make_user())
        saved = []
        for title in ("one", "two", "three"):
            post = await posts.save(
                Post(id=PostId(uuid4()), user_id=owner.id, title=title, content=".")
            )
            saved.append(post.id)
        ordered = (saved[2], saved[0], saved[1])

        # Act
        await users.save(owner.model_copy(update={"saved_posts": ordered}))
        await users.remove_saved_posts([saved[0]])
        reloaded = await users.find_by_id(owner.id)

        # Assert
        assert reloaded.saved_posts == (saved[2], saved[1])
