"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from udiddit.domain.model import Vote
from udiddit.domain.repository import VoteRepository
from udiddit.domain.value import PostId, UserId
from udiddit.persistence.mappers import row_to_vote, vote_to_dict
from udiddit.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, vote: Vote) -> Vote:
        """Insert a vote inside a savepoint.

        A duplicate (user, post) pair raises IntegrityError and only the
        savepoint is rolled back.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote)).returning(votes_table)
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_vote(dict(result.mappings().one()))

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.post_id == post_id)
            .order_by(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes cast by a user."""
        stmt = select(votes_table).where(votes_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def clear_user(self, user_id: UserId) -> int:
        """Set user_id to NULL on all of a user's votes."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.user_id == user_id)
            .values(user_id=None)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post."""
        stmt = delete(votes_table).where(votes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
