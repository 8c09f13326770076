"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.post import Post
from agora.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Find the posts that exist among the given IDs.

        Missing IDs are omitted; the result follows the order of ``post_ids``.

        Args:
            post_ids: Post IDs to resolve

        Returns:
            Existing posts
        """
        pass

    @abstractmethod
    async def find_by_users(self, user_ids: List[UserId]) -> List[Post]:
        """Find posts owned by any of the given users, newest first.

        Args:
            user_ids: Owner IDs

        Returns:
            Posts owned by those users
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post owned by a user.

        Args:
            user_id: Owner ID

        Returns:
            Number of deleted posts
        """
        pass
