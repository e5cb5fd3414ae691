"""In-memory vote repository for testing."""

from typing import Optional

from udiddit.domain.model.vote import Vote
from udiddit.domain.repository.vote import VoteRepository
from udiddit.domain.value import PostId, UserId, VoteId

from .base import InMemoryTable, violation


class InMemoryVoteRepository(InMemoryTable[Vote], VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    async def add(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on this post
        """
        # NULL user ids never collide, as in SQL
        if vote.user_id is not None and await self.find_by_user_and_post(
            vote.user_id, vote.post_id
        ):
            raise violation(
                "one_vote_per_user_and_post",
                f"user_id={vote.user_id}, post_id={vote.post_id}",
            )
        stored = vote.model_copy(update={"id": VoteId(self._next_id())})
        self._rows[stored.id] = stored
        return stored

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        for vote in self._rows.values():
            if vote.user_id == user_id and vote.post_id == post_id:
                return vote
        return None

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all votes on a post."""
        return [v for v in self._rows.values() if v.post_id == post_id]

    async def find_by_user(self, user_id: UserId) -> list[Vote]:
        """Find all votes by a user."""
        return [v for v in self._rows.values() if v.user_id == user_id]

    async def clear_user(self, user_id: UserId) -> int:
        """Set user_id to None on all of a user's votes."""
        votes = await self.find_by_user(user_id)
        for vote in votes:
            self._rows[vote.id] = vote.model_copy(update={"user_id": None})
        return len(votes)

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post."""
        doomed = [vote_id for vote_id, v in self._rows.items() if v.post_id == post_id]
        for vote_id in doomed:
            del self._rows[vote_id]
        return len(doomed)
