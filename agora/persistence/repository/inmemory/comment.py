"""In-memory comment repository for testing."""

from typing import Optional

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId, PostId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self._store.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find comments on a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def find_by_users(self, user_ids: list[UserId]) -> list[Comment]:
        """Find comments by any of the users, newest first."""
        authors = set(user_ids)
        comments = [c for c in self._comments.values() if c.user_id in authors]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete_by_posts(self, post_ids: list[PostId]) -> int:
        """Delete every comment attached to the posts."""
        posts = set(post_ids)
        doomed = [c.id for c in self._comments.values() if c.post_id in posts]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every comment authored by a user."""
        doomed = [c.id for c in self._comments.values() if c.user_id == user_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
