"""Vote entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from udiddit.domain.model.common import DomainModel
from udiddit.domain.value import PostId, UserId, VoteDirection, VoteId


class Vote(DomainModel):
    """Up or down vote on a post.

    Business rules:
    - vote is +1 or -1
    - One vote per (user, post) (enforced by the storage unique constraint)
    - user_id is cleared when the voter is deleted
    """

    id: Optional[VoteId] = None
    vote: VoteDirection
    user_id: Optional[UserId] = None
    post_id: PostId
    time_created: datetime = Field(default_factory=datetime.now)
