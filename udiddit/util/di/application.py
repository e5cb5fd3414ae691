"""Application layer DI providers."""

from dishka import Scope, provide

from udiddit.application.usecase.migration import RunMigrationUseCase
from udiddit.application.usecase.topic import DeleteTopicUseCase
from udiddit.application.usecase.user import DeleteUserUseCase, RenameUserUseCase
from udiddit.domain.repository import (
    LegacySource,
    TopicRepository,
    TransactionManager,
    UserRepository,
)
from udiddit.domain.service import (
    EntityDeriver,
    NormalizerWriter,
    TopicService,
    UserService,
)
from udiddit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    @provide(scope=Scope.REQUEST)
    def get_run_migration_use_case(
        self,
        transaction_manager: TransactionManager,
        legacy_source: LegacySource,
        entity_deriver: EntityDeriver,
        normalizer_writer: NormalizerWriter,
        user_repository: UserRepository,
        topic_repository: TopicRepository,
    ) -> RunMigrationUseCase:
        """Provide run migration use case."""
        return RunMigrationUseCase(
            transaction_manager=transaction_manager,
            legacy_source=legacy_source,
            entity_deriver=entity_deriver,
            normalizer_writer=normalizer_writer,
            user_repository=user_repository,
            topic_repository=topic_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_rename_user_use_case(self, user_service: UserService) -> RenameUserUseCase:
        """Provide rename user use case."""
        return RenameUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_topic_use_case(
        self, topic_service: TopicService
    ) -> DeleteTopicUseCase:
        """Provide delete topic use case."""
        return DeleteTopicUseCase(topic_service=topic_service)
