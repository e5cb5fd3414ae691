"""Reference Resolver: maps legacy natural keys to surrogate ids."""

from udiddit.domain.error import ResolutionError
from udiddit.domain.value import TopicId, UserId

from .entity_deriver import Derivation


class ReferenceResolver:
    """Lookup from legacy username / topic name to surrogate id.

    Built from a completed ``Derivation``, so it is always fully populated.
    A miss means the derivation scan was incomplete and is fatal.
    """

    def __init__(self, derivation: Derivation) -> None:
        self._user_ids = derivation.user_ids
        self._topic_ids = derivation.topic_ids

    def user_id(self, username: str) -> UserId:
        """Resolve a legacy username.

        Raises:
            ResolutionError: If the username was never derived
        """
        try:
            return self._user_ids[username]
        except KeyError:
            raise ResolutionError("username", username) from None

    def topic_id(self, topic_name: str) -> TopicId:
        """Resolve a legacy topic name.

        Raises:
            ResolutionError: If the topic name was never derived
        """
        try:
            return self._topic_ids[topic_name]
        except KeyError:
            raise ResolutionError("topic", topic_name) from None
