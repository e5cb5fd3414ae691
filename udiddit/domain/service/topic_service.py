"""Topic domain service."""

from typing import Optional

import logfire
from sqlalchemy.exc import IntegrityError

from udiddit.domain.error import BusinessRuleViolationError, NotFoundError
from udiddit.domain.model import Topic
from udiddit.domain.repository import PostRepository, TopicRepository
from udiddit.domain.value import PostId, TopicId, TopicName

from .base import Service
from .post_service import PostService


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
            post_repository: Post repository
            post_service: Post domain service
        """
        self.topic_repository = topic_repository
        self.post_repository = post_repository
        self.post_service = post_service

    async def create_topic(
        self, topic_name: TopicName, description: Optional[str] = None
    ) -> Topic:
        """Create a topic.

        Raises:
            BusinessRuleViolationError: If the topic name is taken
        """
        with logfire.span("topic_service.create_topic", topic_name=topic_name.root):
            try:
                return await self.topic_repository.add(
                    Topic(topic_name=topic_name, topic_description=description)
                )
            except IntegrityError:
                logfire.warn("Topic already exists", topic_name=topic_name.root)
                raise BusinessRuleViolationError(
                    f"Topic already exists: {topic_name.root}"
                )

    async def delete_topic(self, topic_id: TopicId) -> int:
        """Delete a topic and every post filed under it.

        Returns:
            Number of posts deleted

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span("topic_service.delete_topic", topic_id=topic_id):
            if not await self.topic_repository.find_by_id(topic_id):
                raise NotFoundError("Topic", str(topic_id))

            posts = await self.post_repository.find_by_topic(topic_id)
            for post in posts:
                await self.post_service.delete_post(PostId(post.id))
            await self.topic_repository.delete(topic_id)

            logfire.info("Topic deleted", topic_id=topic_id, posts_deleted=len(posts))
            return len(posts)
