"""Mock persistence providers for testing."""

from dishka import Scope, provide

from udiddit.domain.repository import (
    CommentRepository,
    LegacySource,
    PostRepository,
    TopicRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from udiddit.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLegacySource,
    InMemoryPostRepository,
    InMemoryTopicRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from udiddit.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self) -> TopicRepository:
        """Provide in-memory topic repository."""
        return InMemoryTopicRepository()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.REQUEST)
    def get_legacy_source(self) -> LegacySource:
        """Provide an empty in-memory legacy corpus for tests to seed."""
        return InMemoryLegacySource()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(
        self,
        user_repository: UserRepository,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> TransactionManager:
        """Provide a transaction manager over this request's repositories."""
        return InMemoryTransactionManager(
            [
                user_repository,
                topic_repository,
                post_repository,
                comment_repository,
                vote_repository,
            ]
        )
