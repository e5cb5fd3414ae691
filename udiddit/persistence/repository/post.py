"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from udiddit.domain.model import Post
from udiddit.domain.repository import PostRepository
from udiddit.domain.value import PostId, TopicId, UserId
from udiddit.persistence.mappers import post_to_dict, row_to_post
from udiddit.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, post: Post) -> Post:
        """Insert a post inside a savepoint.

        A constraint violation only rolls back the savepoint, so the
        enclosing transaction stays usable.
        """
        stmt = insert(posts_table).values(**post_to_dict(post)).returning(posts_table)
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_post(dict(result.mappings().one()))

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_by_topic(self, topic_id: TopicId) -> List[Post]:
        """Find all posts filed under a topic."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.topic_id == topic_id)
            .order_by(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def find_by_user(self, user_id: UserId) -> List[Post]:
        """Find all posts written by a user."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.user_id == user_id)
            .order_by(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def clear_user(self, user_id: UserId) -> int:
        """Set user_id to NULL on all of a user's posts."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.user_id == user_id)
            .values(user_id=None)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post row."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
