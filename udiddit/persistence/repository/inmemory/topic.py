"""In-memory topic repository for testing."""

from typing import Optional

from udiddit.domain.model.topic import Topic
from udiddit.domain.repository.topic import TopicRepository
from udiddit.domain.value import TopicId, TopicName

from .base import InMemoryTable, violation


class InMemoryTopicRepository(InMemoryTable[Topic], TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    async def add(self, topic: Topic) -> Topic:
        """Insert a topic, enforcing name uniqueness."""
        if await self.find_by_name(topic.topic_name):
            raise violation("uq_topics_topic_name", topic.topic_name.root)
        stored = topic.model_copy(update={"id": TopicId(self._next_id())})
        self._rows[stored.id] = stored
        return stored

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find topic by ID."""
        return self._rows.get(topic_id)

    async def find_by_name(self, topic_name: TopicName) -> Optional[Topic]:
        """Find topic by name."""
        for topic in self._rows.values():
            if topic.topic_name == topic_name:
                return topic
        return None

    async def count(self) -> int:
        """Count all topics."""
        return len(self._rows)

    async def delete(self, topic_id: TopicId) -> bool:
        """Delete a topic."""
        return self._rows.pop(topic_id, None) is not None
