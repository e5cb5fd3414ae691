"""Run legacy migration use case."""

import logfire
from pydantic import BaseModel

from udiddit.application.usecase.base import BaseUseCase
from udiddit.domain.error import MigrationAlreadyAppliedError
from udiddit.domain.repository import (
    LegacySource,
    TopicRepository,
    TransactionManager,
    UserRepository,
)
from udiddit.domain.service import EntityDeriver, NormalizerWriter, ReferenceResolver
from udiddit.domain.value import IntegrityRejection


class RunMigrationRequest(BaseModel):
    """Run migration request."""

    dry_run: bool = False


class MigrationReport(BaseModel):
    """Outcome of a migration run."""

    users: int = 0
    topics: int = 0
    posts: int = 0
    comments: int = 0
    votes: int = 0
    committed: bool = False
    rejections: list[IntegrityRejection] = []


class _DryRunRollback(Exception):
    """Raised inside the transaction to discard a dry run."""


class RunMigrationUseCase(BaseUseCase[RunMigrationRequest, MigrationReport]):
    """Use case for migrating the legacy corpus into the normalized schema.

    The whole pipeline runs inside one transaction: derive users and topics,
    then write posts, comments and votes. Any fatal error rolls everything
    back; per-record rejections are collected into the report.
    """

    def __init__(
        self,
        transaction_manager: TransactionManager,
        legacy_source: LegacySource,
        entity_deriver: EntityDeriver,
        normalizer_writer: NormalizerWriter,
        user_repository: UserRepository,
        topic_repository: TopicRepository,
    ) -> None:
        """Initialize run migration use case.

        Args:
            transaction_manager: Unit of work around the pipeline
            legacy_source: Legacy corpus
            entity_deriver: Entity derivation stage
            normalizer_writer: Posts/comments/votes stage
            user_repository: User repository (emptiness check)
            topic_repository: Topic repository (emptiness check)
        """
        self.transaction_manager = transaction_manager
        self.legacy_source = legacy_source
        self.entity_deriver = entity_deriver
        self.normalizer_writer = normalizer_writer
        self.user_repository = user_repository
        self.topic_repository = topic_repository

    async def execute(self, request: RunMigrationRequest) -> MigrationReport:
        """Execute the migration.

        Args:
            request: Run options

        Returns:
            Report with created counts and rejected records

        Raises:
            MigrationAlreadyAppliedError: If the target already holds data
            ResolutionError: If a reference was never derived
            ValidationError: If a derived name violates the schema
            AmbiguousContentError: If the ambiguous content policy is "abort"
        """
        with logfire.span("run_migration", dry_run=request.dry_run):
            report = MigrationReport()
            try:
                async with self.transaction_manager.begin():
                    await self._ensure_empty_target()
                    await self._run(report)
                    if request.dry_run:
                        raise _DryRunRollback()
                report.committed = True
            except _DryRunRollback:
                logfire.info("Dry run rolled back")

            for rejection in report.rejections:
                logfire.warn(
                    "Legacy record rejected",
                    kind=rejection.kind.value,
                    entity=rejection.entity,
                    key=rejection.key,
                    reason=rejection.reason,
                )
            logfire.info(
                "Migration finished",
                committed=report.committed,
                users=report.users,
                topics=report.topics,
                posts=report.posts,
                comments=report.comments,
                votes=report.votes,
                rejected=len(report.rejections),
            )
            return report

    async def _ensure_empty_target(self) -> None:
        users = await self.user_repository.count()
        topics = await self.topic_repository.count()
        if users or topics:
            logfire.error(
                "Migration target is not empty", users=users, topics=topics
            )
            raise MigrationAlreadyAppliedError(
                f"Target already holds {users} users and {topics} topics"
            )

    async def _run(self, report: MigrationReport) -> None:
        derivation = await self.entity_deriver.derive(self.legacy_source)
        report.users = len(derivation.user_ids)
        report.topics = len(derivation.topic_ids)

        resolver = ReferenceResolver(derivation)
        writer = self.normalizer_writer

        post_ids, posts = await writer.write_posts(self.legacy_source, resolver)
        comments = await writer.write_comments(self.legacy_source, resolver, post_ids)
        votes = await writer.write_votes(self.legacy_source, resolver, post_ids)

        report.posts = posts.created
        report.comments = comments.created
        report.votes = votes.created
        report.rejections = [
            *posts.rejections,
            *comments.rejections,
            *votes.rejections,
        ]
