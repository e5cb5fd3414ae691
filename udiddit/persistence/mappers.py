"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Surrogate ids and
timestamps are left out of insert dicts: the database assigns them.
"""

from typing import Any, Dict

from udiddit.domain.model import (
    Comment,
    LegacyComment,
    LegacyPost,
    Post,
    Topic,
    User,
    Vote,
)
from udiddit.domain.value import (
    CommentId,
    LegacyCommentId,
    LegacyPostId,
    PostId,
    TopicId,
    TopicName,
    UserId,
    Username,
    VoteDirection,
    VoteId,
)

_GENERATED = {"id", "time_created", "username_updated"}


def _optional(wrapper, value):
    return wrapper(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        time_created=row["time_created"],
        username_updated=row["username_updated"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to an insert dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return user.model_dump(exclude=_GENERATED)


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model."""
    return Topic(
        id=TopicId(row["id"]),
        topic_name=TopicName(row["topic_name"]),
        topic_description=row.get("topic_description"),
        time_created=row["time_created"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to an insert dict."""
    return topic.model_dump(exclude=_GENERATED)


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        post_title=row["post_title"],
        post_url=row.get("post_url"),
        post_content=row.get("post_content"),
        user_id=_optional(UserId, row.get("user_id")),
        topic_id=TopicId(row["topic_id"]),
        time_created=row["time_created"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to an insert dict."""
    return post.model_dump(exclude=_GENERATED)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        comment_text=row["comment_text"],
        user_id=_optional(UserId, row.get("user_id")),
        post_id=PostId(row["post_id"]),
        comment_parent_id=_optional(CommentId, row.get("comment_parent_id")),
        time_created=row["time_created"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to an insert dict."""
    return comment.model_dump(exclude=_GENERATED)


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        vote=VoteDirection(row["vote"]),
        user_id=_optional(UserId, row.get("user_id")),
        post_id=PostId(row["post_id"]),
        time_created=row["time_created"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to an insert dict.

    The direction is stored as its integer value.
    """
    data = vote.model_dump(exclude=_GENERATED)
    data["vote"] = vote.vote.value
    return data


def row_to_legacy_post(row: Dict[str, Any]) -> LegacyPost:
    """Convert a ``bad_posts`` row to a LegacyPost record.

    NULL columns are carried through as None.
    """
    return LegacyPost(
        id=LegacyPostId(row["id"]),
        title=row.get("title"),
        url=row.get("url"),
        text_content=row.get("text_content"),
        username=row.get("username"),
        topic=row.get("topic"),
        upvotes=row.get("upvotes"),
        downvotes=row.get("downvotes"),
    )


def row_to_legacy_comment(row: Dict[str, Any]) -> LegacyComment:
    """Convert a ``bad_comments`` row to a LegacyComment record."""
    return LegacyComment(
        id=LegacyCommentId(row["id"]),
        post_id=_optional(LegacyPostId, row.get("post_id")),
        username=row.get("username"),
        text_content=row.get("text_content"),
    )
