"""Records of the legacy, denormalized forum schema.

These mirror ``bad_posts`` and ``bad_comments`` as they are and carry no
validation: every legacy column is nullable and malformed legacy data is
expected and handled by the migration.
"""

from typing import Optional

from udiddit.domain.model.common import DomainModel
from udiddit.domain.value import LegacyCommentId, LegacyPostId


class LegacyPost(DomainModel):
    """Flat legacy post with embedded author, topic and voter lists."""

    id: LegacyPostId
    title: Optional[str] = None
    url: Optional[str] = None
    text_content: Optional[str] = None
    username: Optional[str] = None
    topic: Optional[str] = None
    upvotes: Optional[str] = None  # Comma-joined usernames
    downvotes: Optional[str] = None  # Comma-joined usernames


class LegacyComment(DomainModel):
    """Flat legacy comment referencing its post by legacy id."""

    id: LegacyCommentId
    post_id: Optional[LegacyPostId] = None
    username: Optional[str] = None
    text_content: Optional[str] = None
