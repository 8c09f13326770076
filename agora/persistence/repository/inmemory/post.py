"""In-memory post repository for testing."""

from typing import Optional

from agora.domain.model.post import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _posts(self) -> dict[PostId, Post]:
        return self._store.posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Find existing posts among the IDs, in the order given."""
        return [self._posts[p] for p in post_ids if p in self._posts]

    async def find_by_users(self, user_ids: list[UserId]) -> list[Post]:
        """Find posts owned by any of the users, newest first."""
        owners = set(user_ids)
        posts = [post for post in self._posts.values() if post.user_id in owners]
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post owned by a user."""
        doomed = [p.id for p in self._posts.values() if p.user_id == user_id]
        for post_id in doomed:
            del self._posts[post_id]
        return len(doomed)
