"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, UserId
from agora.persistence.mappers import post_to_dict, row_to_post
from agora.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: Post ID to look up

        Returns:
            Post if found, None otherwise
        """
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Find existing posts among the IDs, in the order given."""
        if not post_ids:
            return []
        stmt = select(posts_table).where(posts_table.c.id.in_(post_ids))
        result = await self.session.execute(stmt)
        by_id = {row["id"]: row_to_post(dict(row)) for row in result.mappings()}
        return [by_id[post_id] for post_id in post_ids if post_id in by_id]

    async def find_by_users(self, user_ids: List[UserId]) -> List[Post]:
        """Find posts owned by any of the users, newest first."""
        if not user_ids:
            return []
        stmt = (
            select(posts_table)
            .where(posts_table.c.user_id.in_(user_ids))
            .order_by(desc(posts_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        post_dict = post_to_dict(post)

        exists = await self.session.execute(
            select(posts_table.c.id).where(posts_table.c.id == post.id)
        )
        if exists.first():
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = insert(posts_table).values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        await self.session.execute(
            delete(posts_table).where(posts_table.c.id == post_id)
        )
        await self.session.flush()

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post owned by a user."""
        result = await self.session.execute(
            delete(posts_table).where(posts_table.c.user_id == user_id)
        )
        await self.session.flush()
        return result.rowcount
