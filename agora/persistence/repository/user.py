"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.error import DuplicateFieldError
from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import Email, PostId, UserId, Username
from agora.persistence.mappers import row_to_user, user_to_dict
from agora.persistence.tables import user_saved_posts_table, users_table

# Unique constraint name -> domain field
_UNIQUE_FIELDS = {
    "uq_users_username": "username",
    "uq_users_email": "email",
}


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_saved_posts(
        self, user_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch saved-post lists for multiple users in a single query.

        Args:
            user_ids: List of user IDs

        Returns:
            Dict mapping user_id -> post IDs ordered by position
        """
        if not user_ids:
            return {}

        stmt = (
            select(user_saved_posts_table.c.user_id, user_saved_posts_table.c.post_id)
            .where(user_saved_posts_table.c.user_id.in_(user_ids))
            .order_by(
                user_saved_posts_table.c.user_id, user_saved_posts_table.c.position
            )
        )
        result = await self.session.execute(stmt)

        saved: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            saved[row.user_id].append(row.post_id)
        return saved

    async def _to_users(self, rows: list) -> List[User]:
        saved = await self._fetch_saved_posts([row["id"] for row in rows])
        return [row_to_user(dict(row), saved.get(row["id"], [])) for row in rows]

    async def _find_one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        [user] = await self._to_users([row])
        return user

    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up
            for_update: Take a row lock (SELECT ... FOR UPDATE)

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        return await self._find_one(stmt)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        return await self._find_one(stmt)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        return await self._find_one(stmt)

    async def find_by_login(self, identifier: str) -> Optional[User]:
        """Find a user whose email or username equals the identifier.

        An exact email match wins over a username match.
        """
        stmt = (
            select(users_table)
            .where(
                or_(
                    users_table.c.email == identifier,
                    users_table.c.username == identifier,
                )
            )
            .order_by((users_table.c.email == identifier).desc())
            .limit(1)
        )
        return await self._find_one(stmt)

    async def find_all(self) -> List[User]:
        """Find all users."""
        result = await self.session.execute(select(users_table))
        return await self._to_users(list(result.mappings().all()))

    async def save(self, user: User) -> User:
        """Save a user (create or update) and replace its saved-posts rows.

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            DuplicateFieldError: If a unique constraint is violated
        """
        user_dict = user_to_dict(user)

        exists = await self.session.execute(
            select(users_table.c.id).where(users_table.c.id == user.id)
        )

        if exists.first():
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = insert(users_table).values(**user_dict)

        # A savepoint keeps the request transaction usable after a violation
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            field = next(
                (f for name, f in _UNIQUE_FIELDS.items() if name in str(e.orig)),
                None,
            )
            if field is None:
                raise
            logfire.warn("Unique constraint violated", field=field)
            raise DuplicateFieldError(field) from e

        await self.session.execute(
            delete(user_saved_posts_table).where(
                user_saved_posts_table.c.user_id == user.id
            )
        )
        if user.saved_posts:
            await self.session.execute(
                insert(user_saved_posts_table),
                [
                    {"user_id": user.id, "post_id": post_id, "position": position}
                    for position, post_id in enumerate(user.saved_posts)
                ],
            )
        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user (hard delete)."""
        await self.session.execute(
            delete(users_table).where(users_table.c.id == user_id)
        )
        await self.session.flush()

    async def remove_saved_posts(self, post_ids: List[PostId]) -> None:
        """Remove the posts from every saved-posts list."""
        if not post_ids:
            return
        await self.session.execute(
            delete(user_saved_posts_table).where(
                user_saved_posts_table.c.post_id.in_(post_ids)
            )
        )
        await self.session.flush()
