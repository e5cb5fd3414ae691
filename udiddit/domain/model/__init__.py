"""Domain model entities for Udiddit."""

from udiddit.domain.model.comment import Comment
from udiddit.domain.model.legacy import LegacyComment, LegacyPost
from udiddit.domain.model.post import Post
from udiddit.domain.model.topic import Topic
from udiddit.domain.model.user import User
from udiddit.domain.model.vote import Vote

__all__ = [
    "User",
    "Topic",
    "Post",
    "Comment",
    "Vote",
    "LegacyPost",
    "LegacyComment",
]
