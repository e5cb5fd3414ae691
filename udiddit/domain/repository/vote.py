"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from udiddit.domain.model.vote import Vote
from udiddit.domain.value import PostId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity."""

    @abstractmethod
    async def add(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: Vote without an id

        Returns:
            The stored vote with its assigned id

        Raises:
            IntegrityError: If the user already voted on this post
        """
        pass

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes cast by a user."""
        pass

    @abstractmethod
    async def clear_user(self, user_id: UserId) -> int:
        """Dissociate all votes from a user (set user_id to NULL)."""
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post.

        Returns:
            Number of votes deleted
        """
        pass
