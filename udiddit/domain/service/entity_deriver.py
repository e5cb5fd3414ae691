"""Entity Deriver: first stage of the legacy migration.

Scans the legacy corpus for every username and topic name it references and
persists one user / topic row per distinct name.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from udiddit.domain.error import ValidationError
from udiddit.domain.model import LegacyComment, LegacyPost, Topic, User
from udiddit.domain.repository import LegacySource, TopicRepository, UserRepository
from udiddit.domain.value import TopicId, TopicName, UserId, Username

from .base import Service
from .vote_list import split_vote_lists


@dataclass(frozen=True)
class DerivedNames:
    """Distinct names referenced by the legacy corpus."""

    usernames: frozenset[str]
    topic_names: frozenset[str]


_COMPLETED = object()


@dataclass(frozen=True)
class Derivation:
    """Result of a completed derivation.

    Every derived name has been persisted and carries its surrogate id.
    Only ``EntityDeriver.derive`` produces one; direct construction raises
    ``TypeError``.
    """

    user_ids: Mapping[str, UserId]
    topic_ids: Mapping[str, TopicId]
    _token: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _COMPLETED:
            raise TypeError("Derivation is only produced by EntityDeriver.derive")


def collect_names(
    posts: Iterable[LegacyPost], comments: Iterable[LegacyComment]
) -> DerivedNames:
    """Collect distinct usernames and topic names by exact string equality.

    Usernames come from post authors, comment authors, up-voters and
    down-voters; topic names from posts.

    Raises:
        ValidationError: If a post has no author or topic, or a comment has
            no author
    """
    usernames: set[str] = set()
    topic_names: set[str] = set()

    for post in posts:
        usernames.add(_require(post.username, "username", f"post:{post.id}"))
        topic_names.add(_require(post.topic, "topic name", f"post:{post.id}"))
        usernames.update(
            voter for voter, _ in split_vote_lists(post.upvotes, post.downvotes)
        )

    for comment in comments:
        usernames.add(
            _require(comment.username, "username", f"comment:{comment.id}")
        )

    return DerivedNames(
        usernames=frozenset(usernames), topic_names=frozenset(topic_names)
    )


class EntityDeriver(Service):
    """Derives and persists the users and topics of the legacy corpus."""

    def __init__(
        self, user_repository: UserRepository, topic_repository: TopicRepository
    ) -> None:
        """Initialize entity deriver.

        Args:
            user_repository: User repository
            topic_repository: Topic repository
        """
        self.user_repository = user_repository
        self.topic_repository = topic_repository

    async def scan(self, source: LegacySource) -> DerivedNames:
        """Read the whole legacy corpus and collect the names it references."""
        posts = [post async for post in source.iter_posts()]
        comments = [comment async for comment in source.iter_comments()]
        return collect_names(posts, comments)

    async def derive(self, source: LegacySource) -> Derivation:
        """Scan, validate and persist all derived users and topics.

        Every name is validated before the first insert. Names are inserted
        in sorted order so surrogate ids are deterministic.

        Args:
            source: Legacy corpus

        Returns:
            Completed derivation with name -> id maps

        Raises:
            ValidationError: If a name is empty or too long
            IntegrityError: If a name already exists in the target
        """
        with logfire.span("entity_deriver.derive"):
            names = await self.scan(source)
            usernames = [_to_username(name) for name in sorted(names.usernames)]
            topic_names = [_to_topic_name(name) for name in sorted(names.topic_names)]

            user_ids: dict[str, UserId] = {}
            for username in usernames:
                user = await self.user_repository.add(User(username=username))
                user_ids[username.root] = UserId(user.id)

            topic_ids: dict[str, TopicId] = {}
            for topic_name in topic_names:
                topic = await self.topic_repository.add(Topic(topic_name=topic_name))
                topic_ids[topic_name.root] = TopicId(topic.id)

            logfire.info(
                "Entities derived",
                users=len(user_ids),
                topics=len(topic_ids),
            )
            return Derivation(
                user_ids=MappingProxyType(user_ids),
                topic_ids=MappingProxyType(topic_ids),
                _token=_COMPLETED,
            )


def _require(name: Optional[str], what: str, key: str) -> str:
    if name is None:
        logfire.error("Missing legacy name", kind=what, key=key)
        raise ValidationError(f"Missing {what} on legacy record {key}")
    return name


def _to_username(name: str) -> Username:
    try:
        return Username(name)
    except PydanticValidationError as e:
        logfire.error("Invalid legacy username", username=name)
        raise ValidationError(
            f"Invalid username {name!r}: {_first_error(e)}"
        ) from e


def _to_topic_name(name: str) -> TopicName:
    try:
        return TopicName(name)
    except PydanticValidationError as e:
        logfire.error("Invalid legacy topic name", topic_name=name)
        raise ValidationError(
            f"Invalid topic name {name!r}: {_first_error(e)}"
        ) from e


def _first_error(error: PydanticValidationError) -> str:
    return error.errors()[0]["msg"]
