"""In-memory user repository for testing."""

from typing import Optional

from agora.domain.error import DuplicateFieldError
from agora.domain.model.user import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import Email, PostId, UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same username and email uniqueness as the database.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_login(self, identifier: str) -> Optional[User]:
        """Find a user by email, then by username."""
        for user in self._users.values():
            if user.email.root == identifier:
                return user
        for user in self._users.values():
            if user.username.root == identifier:
                return user
        return None

    async def find_all(self) -> list[User]:
        """Find all users."""
        return list(self._users.values())

    async def save(self, user: User) -> User:
        """Save or update a user."""
        others = [other for other in self._users.values() if other.id != user.id]
        if any(other.username == user.username for other in others):
            raise DuplicateFieldError("username")
        if any(other.email == user.email for other in others):
            raise DuplicateFieldError("email")
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        self._users.pop(user_id, None)

    async def remove_saved_posts(self, post_ids: list[PostId]) -> None:
        """Remove the posts from every saved-posts list."""
        removed = set(post_ids)
        for user_id, user in list(self._users.items()):
            kept = tuple(p for p in user.saved_posts if p not in removed)
            if kept != user.saved_posts:
                self._users[user_id] = user.model_copy(update={"saved_posts": kept})
