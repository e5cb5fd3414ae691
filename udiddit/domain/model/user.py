"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from udiddit.domain.model.common import DomainModel
from udiddit.domain.value import UserId, Username


class User(DomainModel):
    """Registered user.

    ``username_updated`` is derived: it only moves when the username changes,
    and only through ``with_username``.
    """

    id: Optional[UserId] = None  # Assigned by storage on insert
    username: Username
    time_created: datetime = Field(default_factory=datetime.now)
    username_updated: datetime = Field(default_factory=datetime.now)

    def with_username(self, username: Username, now: datetime) -> "User":
        """Return a copy carrying the new username and a refreshed timestamp.

        Renaming to the same username is a no-op and keeps the timestamp.
        """
        if username == self.username:
            return self
        return self.model_copy(update={"username": username, "username_updated": now})
