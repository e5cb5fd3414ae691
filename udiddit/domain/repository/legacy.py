"""Legacy source interface.

The legacy corpus is read-only. Each iterator is a fresh, restartable pass
over the source table, ordered by legacy id.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from udiddit.domain.model.legacy import LegacyComment, LegacyPost


class LegacySource(ABC):
    """Read-only access to the flat legacy posts and comments."""

    @abstractmethod
    def iter_posts(self) -> AsyncIterator[LegacyPost]:
        """Iterate over legacy posts in id order."""
        pass

    @abstractmethod
    def iter_comments(self) -> AsyncIterator[LegacyComment]:
        """Iterate over legacy comments in id order."""
        pass
