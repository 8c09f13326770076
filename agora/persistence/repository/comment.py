"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, PostId, UserId
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find comments on a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings()]

    async def find_by_users(self, user_ids: List[UserId]) -> List[Comment]:
        """Find comments by any of the users, newest first."""
        if not user_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.user_id.in_(user_ids))
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: Comment to save

        Returns:
            Saved comment
        """
        comment_dict = comment_to_dict(comment)

        exists = await self.session.execute(
            select(comments_table.c.id).where(comments_table.c.id == comment.id)
        )
        if exists.first():
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_by_posts(self, post_ids: List[PostId]) -> int:
        """Delete every comment attached to the posts."""
        if not post_ids:
            return 0
        result = await self.session.execute(
            delete(comments_table).where(comments_table.c.post_id.in_(post_ids))
        )
        await self.session.flush()
        return result.rowcount

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every comment authored by a user."""
        result = await self.session.execute(
            delete(comments_table).where(comments_table.c.user_id == user_id)
        )
        await self.session.flush()
        return result.rowcount
