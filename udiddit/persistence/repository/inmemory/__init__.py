"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .legacy import InMemoryLegacySource
from .post import InMemoryPostRepository
from .topic import InMemoryTopicRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLegacySource",
    "InMemoryPostRepository",
    "InMemoryTopicRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
