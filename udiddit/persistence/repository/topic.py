"""PostgreSQL implementation of Topic repository."""

from typing import Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from udiddit.domain.model import Topic
from udiddit.domain.repository import TopicRepository
from udiddit.domain.value import TopicId, TopicName
from udiddit.persistence.mappers import row_to_topic, topic_to_dict
from udiddit.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, topic: Topic) -> Topic:
        """Insert a topic inside a savepoint."""
        stmt = (
            insert(topics_table).values(**topic_to_dict(topic)).returning(topics_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_topic(dict(result.mappings().one()))

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        stmt = select(topics_table).where(topics_table.c.id == topic_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_topic(dict(row)) if row else None

    async def find_by_name(self, topic_name: TopicName) -> Optional[Topic]:
        """Find a topic by exact name."""
        stmt = select(topics_table).where(topics_table.c.topic_name == topic_name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_topic(dict(row)) if row else None

    async def count(self) -> int:
        """Count all topics."""
        result = await self.session.execute(
            select(func.count()).select_from(topics_table)
        )
        return result.scalar_one()

    async def delete(self, topic_id: TopicId) -> bool:
        """Delete a topic row."""
        stmt = delete(topics_table).where(topics_table.c.id == topic_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
