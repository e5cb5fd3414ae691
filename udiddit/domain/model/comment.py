"""Comment entity.

Comments form threads of arbitrary depth through ``comment_parent_id``.
A reply is only ever attached to a comment that already exists on the same
post, so threads cannot contain cycles.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from udiddit.domain.model.common import DomainModel
from udiddit.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post, or a reply to another comment."""

    id: Optional[CommentId] = None
    comment_text: str = Field(min_length=1)
    user_id: Optional[UserId] = None
    post_id: PostId
    comment_parent_id: Optional[CommentId] = None  # None for top-level
    time_created: datetime = Field(default_factory=datetime.now)

    @field_validator("comment_text")
    @classmethod
    def validate_text_not_blank(cls, v: str) -> str:
        """Reject whitespace-only comments."""
        if not v.strip():
            raise ValueError("Comment text can't be empty")
        return v
