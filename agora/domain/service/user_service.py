"""User domain service."""

from collections import defaultdict
from dataclasses import dataclass, field

import logfire

from agora.domain.error import DuplicateFieldError, NotFoundError
from agora.domain.model import Comment, Post, User
from agora.domain.repository import CommentRepository, PostRepository, UserRepository
from agora.domain.value import Email, PostId, UserId, Username

from .base import Service


@dataclass
class UserContent:
    """A user together with the content they own."""

    user: User
    posts: list[Post] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)

    @property
    def top_points(self) -> int | None:
        """Highest points among the user's posts, None without posts."""
        if not self.posts:
            return None
        return max(post.points for post in self.posts)


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def get_by_id(self, user_id: UserId, for_update: bool = False) -> User:
        """Get user by ID.

        Args:
            user_id: User ID
            for_update: Lock the user row for the rest of the transaction

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.get_by_id", user_id=str(user_id), for_update=for_update
        ):
            user = await self.user_repository.find_by_id(user_id, for_update=for_update)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), username=user.username.root)
            return user

    async def get_by_username(self, username: Username) -> User:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username.root)
                raise NotFoundError("User", username.root)
            logfire.info("User found", username=username.root, user_id=str(user.id))
            return user

    async def find_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_email", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", email=email.root, user_id=str(user.id))
            else:
                logfire.info("No user with email", email=email.root)
            return user

    async def find_by_login(self, identifier: str) -> User | None:
        """Get the user whose email or username equals the identifier."""
        with logfire.span("user_service.find_by_login", identifier=identifier):
            return await self.user_repository.find_by_login(identifier)

    async def ensure_unique(
        self,
        username: Username | None,
        email: Email | None,
        exclude_id: UserId | None = None,
    ) -> None:
        """Check that no other user holds the username or email.

        Username is checked before email, so a request colliding on both
        reports the username.

        Args:
            username: Username to check (None to skip)
            email: Email to check (None to skip)
            exclude_id: The user being updated, whose own values are allowed

        Raises:
            DuplicateFieldError: On the first collision
        """
        with logfire.span(
            "user_service.ensure_unique",
            exclude_id=str(exclude_id) if exclude_id else None,
        ):
            if username is not None:
                holder = await self.user_repository.find_by_username(username)
                if holder and holder.id != exclude_id:
                    logfire.warn("Username already taken", username=username.root)
                    raise DuplicateFieldError("username")

            if email is not None:
                holder = await self.user_repository.find_by_email(email)
                if holder and holder.id != exclude_id:
                    logfire.warn("Email already taken", email=email.root)
                    raise DuplicateFieldError("email")

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            DuplicateFieldError: If a unique constraint is hit at write time
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=user.username.root
        ):
            saved = await self.user_repository.save(user)
            logfire.info(
                "User saved", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def load_content(self, users: list[User]) -> list[UserContent]:
        """Attach owned posts and authored comments to each user.

        Two batch queries regardless of the number of users.

        Args:
            users: Users to load content for

        Returns:
            One UserContent per user, in input order
        """
        with logfire.span("user_service.load_content", count=len(users)):
            user_ids = [user.id for user in users]
            posts = await self.post_repository.find_by_users(user_ids)
            comments = await self.comment_repository.find_by_users(user_ids)

            posts_by_user: dict[UserId, list[Post]] = defaultdict(list)
            for post in posts:
                posts_by_user[post.user_id].append(post)
            comments_by_user: dict[UserId, list[Comment]] = defaultdict(list)
            for comment in comments:
                comments_by_user[comment.user_id].append(comment)

            return [
                UserContent(
                    user=user,
                    posts=posts_by_user.get(user.id, []),
                    comments=comments_by_user.get(user.id, []),
                )
                for user in users
            ]

    async def list_by_popularity(self) -> list[UserContent]:
        """List every user with their content, most popular first.

        Popularity is the highest points among a user's posts. Users
        without posts come last. Ties are broken by user ID ascending.

        Returns:
            Ordered list of UserContent
        """
        with logfire.span("user_service.list_by_popularity"):
            users = await self.user_repository.find_all()
            entries = await self.load_content(users)

            def sort_key(entry: UserContent) -> tuple[int, int, str]:
                top = entry.top_points
                if top is None:
                    return (1, 0, str(entry.user.id))
                return (0, -top, str(entry.user.id))

            entries.sort(key=sort_key)
            logfire.info("Listed users by popularity", count=len(entries))
            return entries

    async def remove_saved_posts(self, post_ids: list[PostId]) -> None:
        """Drop posts from every user's saved-posts list.

        Args:
            post_ids: Posts being deleted
        """
        if not post_ids:
            return
        with logfire.span("user_service.remove_saved_posts", count=len(post_ids)):
            await self.user_repository.remove_saved_posts(post_ids)

    async def delete(self, user_id: UserId) -> None:
        """Delete a user record.

        Args:
            user_id: User ID
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id))
