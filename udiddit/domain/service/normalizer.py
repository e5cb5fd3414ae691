"""Normalizer/Writer: builds and persists normalized posts, comments and votes.

Each pass resolves every foreign key before writing a row. Per-record
constraint violations become ``IntegrityRejection`` entries and the pass
continues; resolution failures are fatal.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from udiddit.config import MigrationSettings
from udiddit.domain.error import AmbiguousContentError, ResolutionError
from udiddit.domain.model import Comment, LegacyPost, Post, Vote
from udiddit.domain.repository import (
    CommentRepository,
    LegacySource,
    PostRepository,
    VoteRepository,
)
from udiddit.domain.value import (
    IntegrityRejection,
    LegacyPostId,
    PostId,
    RejectionKind,
)
from udiddit.domain.value.types import POST_TITLE_MAX_LENGTH

from .base import Service
from .reference_resolver import ReferenceResolver
from .vote_list import split_vote_lists


@dataclass
class PassResult:
    """Outcome of one writer pass."""

    created: int = 0
    rejections: list[IntegrityRejection] = field(default_factory=list)

    def reject(self, kind: RejectionKind, entity: str, key: str, reason: str) -> None:
        """Record a skipped legacy record."""
        self.rejections.append(
            IntegrityRejection(kind=kind, entity=entity, key=key, reason=reason)
        )


@dataclass(frozen=True)
class PostIdMap:
    """Legacy post id -> new surrogate id, produced by the Posts pass.

    Posts rejected during the pass are remembered so that their comments and
    votes can be rejected as orphans rather than treated as dangling.
    """

    new_ids: Mapping[LegacyPostId, PostId]
    rejected: frozenset[LegacyPostId]

    def resolve(self, legacy_post_id: LegacyPostId) -> Optional[PostId]:
        """Return the new post id, or None if the legacy post was rejected.

        Raises:
            ResolutionError: If the legacy post is not part of the corpus
        """
        if legacy_post_id in self.new_ids:
            return self.new_ids[legacy_post_id]
        if legacy_post_id in self.rejected:
            return None
        raise ResolutionError("post", str(legacy_post_id))


def truncate_title(title: Optional[str]) -> Optional[str]:
    """Cut a free-text legacy title down to the post title limit.

    A NULL title stays None and is rejected by Post validation.
    """
    if title is None:
        return None
    return title[:POST_TITLE_MAX_LENGTH]


class NormalizerWriter(Service):
    """Writes normalized posts, comments and votes from the legacy corpus."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        settings: MigrationSettings,
    ) -> None:
        """Initialize normalizer/writer.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
            vote_repository: Vote repository
            settings: Migration settings
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.settings = settings

    async def write_posts(
        self, source: LegacySource, resolver: ReferenceResolver
    ) -> tuple[PostIdMap, PassResult]:
        """Posts pass.

        Titles are truncated to 100 characters; URL or content is carried over
        as-is. Legacy posts with both or neither are not written.

        Args:
            source: Legacy corpus
            resolver: Name -> id lookup from the derivation stage

        Returns:
            Legacy -> new post id map and the pass result

        Raises:
            ResolutionError: If author or topic was never derived
            AmbiguousContentError: If a post has url and content and the
                policy is "abort"
        """
        with logfire.span("normalizer.write_posts"):
            result = PassResult()
            new_ids: dict[LegacyPostId, PostId] = {}
            rejected: set[LegacyPostId] = set()

            async for legacy in source.iter_posts():
                key = f"post:{legacy.id}"
                user_id = resolver.user_id(legacy.username)
                topic_id = resolver.topic_id(legacy.topic)

                content_problem = self._check_content(legacy)
                if content_problem is not None:
                    kind, reason = content_problem
                    result.reject(kind, "post", key, reason)
                    rejected.add(legacy.id)
                    continue

                try:
                    post = Post(
                        post_title=truncate_title(legacy.title),
                        post_url=legacy.url,
                        post_content=legacy.text_content,
                        user_id=user_id,
                        topic_id=topic_id,
                    )
                    saved = await self.post_repository.add(post)
                except (PydanticValidationError, IntegrityError) as e:
                    result.reject(
                        RejectionKind.CONSTRAINT_VIOLATION, "post", key, _describe(e)
                    )
                    rejected.add(legacy.id)
                    continue

                new_ids[legacy.id] = PostId(saved.id)
                result.created += 1

            logfire.info(
                "Posts written",
                created=result.created,
                rejected=len(result.rejections),
            )
            post_ids = PostIdMap(
                new_ids=MappingProxyType(new_ids), rejected=frozenset(rejected)
            )
            return post_ids, result

    async def write_comments(
        self,
        source: LegacySource,
        resolver: ReferenceResolver,
        post_ids: PostIdMap,
    ) -> PassResult:
        """Comments pass.

        Legacy comments are flat, so every comment is written top-level.
        Missing text or a missing legacy post id is a per-record rejection.

        Raises:
            ResolutionError: If the author or the legacy post is unknown
        """
        with logfire.span("normalizer.write_comments"):
            result = PassResult()

            async for legacy in source.iter_comments():
                key = f"comment:{legacy.id}"
                user_id = resolver.user_id(legacy.username)
                if legacy.post_id is None:
                    result.reject(
                        RejectionKind.CONSTRAINT_VIOLATION,
                        "comment",
                        key,
                        "legacy post id is missing",
                    )
                    continue

                post_id = post_ids.resolve(legacy.post_id)
                if post_id is None:
                    result.reject(
                        RejectionKind.ORPHANED,
                        "comment",
                        key,
                        f"legacy post {legacy.post_id} was rejected",
                    )
                    continue

                try:
                    comment = Comment(
                        comment_text=legacy.text_content,
                        user_id=user_id,
                        post_id=post_id,
                    )
                    await self.comment_repository.add(comment)
                except (PydanticValidationError, IntegrityError) as e:
                    result.reject(
                        RejectionKind.CONSTRAINT_VIOLATION,
                        "comment",
                        key,
                        _describe(e),
                    )
                    continue

                result.created += 1

            logfire.info(
                "Comments written",
                created=result.created,
                rejected=len(result.rejections),
            )
            return result

    async def write_votes(
        self,
        source: LegacySource,
        resolver: ReferenceResolver,
        post_ids: PostIdMap,
    ) -> PassResult:
        """Votes pass.

        One vote row per voter token; up-votes are written before down-votes,
        so a voter listed on both sides keeps the up-vote.

        Raises:
            ResolutionError: If a voter was never derived
        """
        with logfire.span("normalizer.write_votes"):
            result = PassResult()

            async for legacy in source.iter_posts():
                post_id = post_ids.resolve(legacy.id)
                for username, direction in split_vote_lists(
                    legacy.upvotes, legacy.downvotes
                ):
                    key = f"vote:post={legacy.id},user={username}"
                    user_id = resolver.user_id(username)
                    if post_id is None:
                        result.reject(
                            RejectionKind.ORPHANED,
                            "vote",
                            key,
                            f"legacy post {legacy.id} was rejected",
                        )
                        continue

                    try:
                        await self.vote_repository.add(
                            Vote(vote=direction, user_id=user_id, post_id=post_id)
                        )
                    except IntegrityError:
                        result.reject(
                            RejectionKind.DUPLICATE_VOTE,
                            "vote",
                            key,
                            f"{username!r} already voted on legacy post {legacy.id}",
                        )
                        continue

                    result.created += 1

            logfire.info(
                "Votes written",
                created=result.created,
                rejected=len(result.rejections),
            )
            return result

    def _check_content(
        self, legacy: LegacyPost
    ) -> Optional[tuple[RejectionKind, str]]:
        """Apply the url/content exclusivity rule to a legacy post."""
        if legacy.url is not None and legacy.text_content is not None:
            if self.settings.ambiguous_content_policy == "abort":
                logfire.error("Ambiguous legacy post", legacy_post_id=legacy.id)
                raise AmbiguousContentError(legacy.id)
            return (
                RejectionKind.AMBIGUOUS_CONTENT,
                "both url and text content are set",
            )
        if legacy.url is None and legacy.text_content is None:
            return RejectionKind.MISSING_CONTENT, "neither url nor text content is set"
        return None


def _describe(error: Exception) -> str:
    if isinstance(error, PydanticValidationError):
        return "; ".join(err["msg"] for err in error.errors())
    if isinstance(error, IntegrityError):
        return str(error.orig)
    return str(error)
