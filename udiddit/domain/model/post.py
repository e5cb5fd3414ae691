"""Post entity.

A post links to a URL or carries text content, never both and never neither.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from udiddit.domain.model.common import DomainModel
from udiddit.domain.value import PostId, TopicId, UserId
from udiddit.domain.value.types import POST_TITLE_MAX_LENGTH


class Post(DomainModel):
    """Post entity.

    Business rules:
    - Title is required, at most 100 characters and not blank
    - Exactly one of post_url / post_content is set
    - user_id is cleared (not cascaded) when the author is deleted
    """

    id: Optional[PostId] = None
    post_title: str = Field(min_length=1, max_length=POST_TITLE_MAX_LENGTH)
    post_url: Optional[str] = None
    post_content: Optional[str] = None
    user_id: Optional[UserId] = None
    topic_id: TopicId
    time_created: datetime = Field(default_factory=datetime.now)

    @field_validator("post_title")
    @classmethod
    def validate_title_not_blank(cls, v: str) -> str:
        """Reject whitespace-only titles."""
        if not v.strip():
            raise ValueError("Post title can't be empty")
        return v

    @model_validator(mode="after")
    def validate_url_or_content(self) -> "Post":
        """Validate that exactly one of URL or content is provided."""
        if self.post_url is not None and self.post_content is not None:
            raise ValueError("Post can't have both a URL and text content")
        if self.post_url is None and self.post_content is None:
            raise ValueError("Post requires either a URL or text content")
        return self
