"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from udiddit.config import Settings
from udiddit.domain.repository import (
    CommentRepository,
    LegacySource,
    PostRepository,
    TopicRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from udiddit.persistence.database import create_engine, create_session_factory
from udiddit.persistence.repository import (
    PostgresCommentRepository,
    PostgresLegacySource,
    PostgresPostRepository,
    PostgresTopicRepository,
    PostgresTransactionManager,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from udiddit.util.di.base import ProviderBase
from udiddit.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Work done outside an explicit ``TransactionManager.begin`` block is
        committed when the scope closes, or rolled back on error.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide transaction manager bound to the request session."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_legacy_source(self, session: AsyncSession) -> LegacySource:
        """Provide legacy bad_posts/bad_comments reader."""
        return PostgresLegacySource(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, session: AsyncSession) -> TopicRepository:
        """Provide Topic repository."""
        return PostgresTopicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)
