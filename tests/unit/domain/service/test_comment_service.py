"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from agora.domain.error import NotFoundError
from agora.domain.service import CommentService
from agora.domain.value import CommentId, PostId, UserId
from agora.persistence.repository.inmemory import InMemoryCommentRepository


@pytest.fixture
def service() -> CommentService:
    return CommentService(InMemoryCommentRepository())


class TestCommentService:
    """Tests for CommentService."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, service):
        """Should store the comment with its post and author."""
        # Arrange
        post_id, user_id = PostId(uuid4()), UserId(uuid4())

        # Act
        comment = await service.create_comment(post_id, user_id, "Great read")
        loaded = await service.get_by_id(comment.id)

        # Assert
        assert loaded.post_id == post_id
        assert loaded.user_id == user_id
        assert loaded.content == "Great read"

    @pytest.mark.asyncio
    async def test_get_missing_comment(self, service):
        """Should raise NotFoundError for an unknown comment."""
        with pytest.raises(NotFoundError):
            await service.get_by_id(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_for_user(self, service):
        """Should delete comments on the user's posts and by the user."""
        # Arrange
        leaving, staying = UserId(uuid4()), UserId(uuid4())
        their_post, other_post = PostId(uuid4()), PostId(uuid4())
        await service.create_comment(their_post, staying, "on their post")
        await service.create_comment(other_post, leaving, "written by them")
        survivor = await service.create_comment(other_post, staying, "unrelated")

        # Act
        deleted = await service.delete_for_user(leaving, [their_post])

        # Assert
        assert deleted == 2
        assert [c.id for c in await service.find_by_post(other_post)] == [
            survivor.id
        ]
        assert await service.find_by_post(their_post) == []

    @pytest.mark.asyncio
    async def test_delete_for_post(self, service):
        """Should delete only the comments on one post."""
        # Arrange
        user_id = UserId(uuid4())
        target, other = PostId(uuid4()), PostId(uuid4())
        await service.create_comment(target, user_id, "a")
        await service.create_comment(target, user_id, "b")
        await service.create_comment(other, user_id, "c")

        # Act
        deleted = await service.delete_for_post(target)

        # Assert
        assert deleted == 2
        assert len(await service.find_by_post(other)) == 1
