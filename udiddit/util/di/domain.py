"""Domain layer DI providers."""

from dishka import Scope, provide

from udiddit.config import MigrationSettings
from udiddit.domain.repository import (
    CommentRepository,
    PostRepository,
    TopicRepository,
    UserRepository,
    VoteRepository,
)
from udiddit.domain.service import (
    CommentService,
    EntityDeriver,
    NormalizerWriter,
    PostService,
    TopicService,
    UserService,
)
from udiddit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle: one request is one unit of work.
    """

    scope = Scope.REQUEST

    @provide
    def get_entity_deriver(
        self, user_repository: UserRepository, topic_repository: TopicRepository
    ) -> EntityDeriver:
        """Provide entity deriver."""
        return EntityDeriver(
            user_repository=user_repository, topic_repository=topic_repository
        )

    @provide
    def get_normalizer_writer(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        settings: MigrationSettings,
    ) -> NormalizerWriter:
        """Provide normalizer/writer."""
        return NormalizerWriter(
            post_repository=post_repository,
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            settings=settings,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            vote_repository=vote_repository,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        topic_repository: TopicRepository,
        vote_repository: VoteRepository,
        comment_service: CommentService,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            topic_repository=topic_repository,
            vote_repository=vote_repository,
            comment_service=comment_service,
        )

    @provide
    def get_topic_service(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> TopicService:
        """Provide topic domain service."""
        return TopicService(
            topic_repository=topic_repository,
            post_repository=post_repository,
            post_service=post_service,
        )
