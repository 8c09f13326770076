"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.comment import Comment
from agora.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            Comments on the post
        """
        pass

    @abstractmethod
    async def find_by_users(self, user_ids: List[UserId]) -> List[Comment]:
        """Find comments authored by any of the given users, newest first.

        Args:
            user_ids: Author IDs

        Returns:
            Comments by those users
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete_by_posts(self, post_ids: List[PostId]) -> int:
        """Delete every comment attached to the given posts.

        Args:
            post_ids: Post IDs

        Returns:
            Number of deleted comments
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every comment authored by a user.

        Args:
            user_id: Author ID

        Returns:
            Number of deleted comments
        """
        pass
