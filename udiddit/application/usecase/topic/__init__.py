"""Topic use cases."""

from .delete_topic import DeleteTopicRequest, DeleteTopicResponse, DeleteTopicUseCase

__all__ = [
    "DeleteTopicRequest",
    "DeleteTopicResponse",
    "DeleteTopicUseCase",
]
