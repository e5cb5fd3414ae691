"""Topic entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from udiddit.domain.model.common import DomainModel
from udiddit.domain.value import TopicId, TopicName
from udiddit.domain.value.types import TOPIC_DESCRIPTION_MAX_LENGTH


class Topic(DomainModel):
    """Topic that posts are filed under.

    Deleting a topic deletes all of its posts.
    """

    id: Optional[TopicId] = None
    topic_name: TopicName
    topic_description: Optional[str] = Field(
        default=None, max_length=TOPIC_DESCRIPTION_MAX_LENGTH
    )
    time_created: datetime = Field(default_factory=datetime.now)
