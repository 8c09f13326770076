"""Comment domain service."""

from uuid import uuid4

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.comment import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, post_id: PostId, user_id: UserId, content: str
    ) -> Comment:
        """Create a comment on a post.

        The caller has already confirmed that the post and the author exist.

        Args:
            post_id: Post ID
            user_id: Author user ID
            content: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            user_id=str(user_id),
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                user_id=user_id,
                content=content,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post_id)
            )
            return saved

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment entity

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.get_by_id", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Get comments on a post, oldest first."""
        with logfire.span("comment_service.find_by_post", post_id=str(post_id)):
            return await self.comment_repository.find_by_post(post_id)

    async def delete_for_user(self, user_id: UserId, post_ids: list[PostId]) -> int:
        """Delete the comments a user's removal orphans.

        That is every comment attached to the user's posts plus every
        comment the user authored elsewhere.

        Args:
            user_id: User being removed
            post_ids: IDs of the posts the user owns

        Returns:
            Number of deleted comments
        """
        with logfire.span("comment_service.delete_for_user", user_id=str(user_id)):
            on_posts = await self.comment_repository.delete_by_posts(post_ids)
            authored = await self.comment_repository.delete_by_user(user_id)
            logfire.info(
                "Comments deleted",
                user_id=str(user_id),
                on_posts=on_posts,
                authored=authored,
            )
            return on_posts + authored

    async def delete_for_post(self, post_id: PostId) -> int:
        """Delete every comment attached to a post.

        Args:
            post_id: Post being removed

        Returns:
            Number of deleted comments
        """
        with logfire.span("comment_service.delete_for_post", post_id=str(post_id)):
            deleted = await self.comment_repository.delete_by_posts([post_id])
            logfire.info("Comments deleted", post_id=str(post_id), count=deleted)
            return deleted
