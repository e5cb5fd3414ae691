"""PostgreSQL repository implementations."""

from udiddit.persistence.repository.comment import PostgresCommentRepository
from udiddit.persistence.repository.legacy import PostgresLegacySource
from udiddit.persistence.repository.post import PostgresPostRepository
from udiddit.persistence.repository.topic import PostgresTopicRepository
from udiddit.persistence.repository.transaction import PostgresTransactionManager
from udiddit.persistence.repository.user import PostgresUserRepository
from udiddit.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTopicRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresLegacySource",
    "PostgresTransactionManager",
]
