"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from udiddit.domain.model.topic import Topic
from udiddit.domain.value import TopicId, TopicName


class TopicRepository(ABC):
    """Repository for Topic entity."""

    @abstractmethod
    async def add(self, topic: Topic) -> Topic:
        """Insert a new topic.

        Raises:
            IntegrityError: If the topic name is already taken
        """
        pass

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, topic_name: TopicName) -> Optional[Topic]:
        """Find a topic by exact name."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all topics."""
        pass

    @abstractmethod
    async def delete(self, topic_id: TopicId) -> bool:
        """Delete a topic row.

        Callers are responsible for deleting the topic's posts first.
        """
        pass
