"""Domain value objects for Udiddit."""

from udiddit.domain.value.identifiers import (
    CommentId,
    LegacyCommentId,
    LegacyPostId,
    PostId,
    TopicId,
    UserId,
    VoteId,
)
from udiddit.domain.value.types import (
    IntegrityRejection,
    RejectionKind,
    TopicName,
    Username,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "TopicId",
    "PostId",
    "CommentId",
    "VoteId",
    "LegacyPostId",
    "LegacyCommentId",
    # Types
    "Username",
    "TopicName",
    "VoteDirection",
    "RejectionKind",
    "IntegrityRejection",
]
