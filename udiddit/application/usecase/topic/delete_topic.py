"""Delete topic use case."""

from pydantic import BaseModel

from udiddit.application.usecase.base import BaseUseCase
from udiddit.domain.service import TopicService
from udiddit.domain.value import TopicId


class DeleteTopicRequest(BaseModel):
    """Delete topic request."""

    topic_id: int


class DeleteTopicResponse(BaseModel):
    """Delete topic response."""

    topic_id: int
    posts_deleted: int


class DeleteTopicUseCase(BaseUseCase[DeleteTopicRequest, DeleteTopicResponse]):
    """Use case for deleting a topic with all of its posts."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize delete topic use case.

        Args:
            topic_service: Topic service
        """
        self.topic_service = topic_service

    async def execute(self, request: DeleteTopicRequest) -> DeleteTopicResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If the topic does not exist
        """
        posts_deleted = await self.topic_service.delete_topic(
            TopicId(request.topic_id)
        )
        return DeleteTopicResponse(
            topic_id=request.topic_id, posts_deleted=posts_deleted
        )
