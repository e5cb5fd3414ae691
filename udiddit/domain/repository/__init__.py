"""Repository interfaces for Udiddit domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from udiddit.domain.repository.comment import CommentRepository
from udiddit.domain.repository.legacy import LegacySource
from udiddit.domain.repository.post import PostRepository
from udiddit.domain.repository.topic import TopicRepository
from udiddit.domain.repository.transaction import TransactionManager
from udiddit.domain.repository.user import UserRepository
from udiddit.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "TopicRepository",
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
    "LegacySource",
    "TransactionManager",
]
