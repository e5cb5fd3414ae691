"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from udiddit.domain.model import Comment
from udiddit.domain.repository import CommentRepository
from udiddit.domain.value import CommentId, PostId, UserId
from udiddit.persistence.mappers import comment_to_dict, row_to_comment
from udiddit.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment inside a savepoint."""
        stmt = (
            insert(comments_table)
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_comment(dict(result.mappings().one()))

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.comment_parent_id == parent_id)
            .order_by(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_by_user(self, user_id: UserId) -> List[Comment]:
        """Find all comments written by a user."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.user_id == user_id)
            .order_by(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def clear_user(self, user_id: UserId) -> int:
        """Set user_id to NULL on all of a user's comments."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.user_id == user_id)
            .values(user_id=None)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment row."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
