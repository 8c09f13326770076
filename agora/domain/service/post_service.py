"""Post domain service."""

from uuid import uuid4

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.post import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, user_id: UserId, title: str, content: str) -> Post:
        """Create a post owned by the user.

        Args:
            user_id: Owner ID (must exist)
            title: Post title
            content: Post body

        Returns:
            Created post with zero points
        """
        with logfire.span("post_service.create_post", user_id=str(user_id)):
            post = Post(
                id=PostId(uuid4()),
                user_id=user_id,
                title=title,
                content=content,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), user_id=str(user_id))
            return saved

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post entity

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def find_posts_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Resolve post IDs, omitting the ones that do not exist.

        Args:
            post_ids: Post IDs in caller order

        Returns:
            Existing posts in the order of ``post_ids``
        """
        with logfire.span("post_service.find_posts_by_ids", requested=len(post_ids)):
            if not post_ids:
                return []
            posts = await self.post_repository.find_by_ids(post_ids)
            logfire.info(
                "Resolved posts", requested=len(post_ids), found=len(posts)
            )
            return posts

    async def find_by_user(self, user_id: UserId) -> list[Post]:
        """Get all posts owned by a user, newest first."""
        with logfire.span("post_service.find_by_user", user_id=str(user_id)):
            return await self.post_repository.find_by_users([user_id])

    async def delete(self, post_id: PostId) -> None:
        """Delete a single post.

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.delete", post_id=str(post_id)):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post owned by a user.

        Args:
            user_id: Owner ID

        Returns:
            Number of deleted posts
        """
        with logfire.span("post_service.delete_by_user", user_id=str(user_id)):
            deleted = await self.post_repository.delete_by_user(user_id)
            logfire.info("Posts deleted", user_id=str(user_id), count=deleted)
            return deleted
