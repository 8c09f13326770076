"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.user import User
from agora.domain.value import Email, PostId, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations, including the
    saved-posts association. Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by exact username.

        Args:
            username: The username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by exact email.

        Args:
            email: The email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_login(self, identifier: str) -> Optional[User]:
        """Find the user whose email OR username equals the identifier.

        Args:
            identifier: Email address or username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users.

        Returns:
            Every stored user, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update), including its saved-posts list.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            DuplicateFieldError: If the username or email belongs to another user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user (hard delete).

        Args:
            user_id: The user ID to delete
        """
        pass

    @abstractmethod
    async def remove_saved_posts(self, post_ids: List[PostId]) -> None:
        """Remove the given posts from every user's saved-posts list.

        Args:
            post_ids: Posts about to be deleted
        """
        pass
