"""In-memory comment repository for testing."""

from typing import Optional

from udiddit.domain.model.comment import Comment
from udiddit.domain.repository.comment import CommentRepository
from udiddit.domain.value import CommentId, PostId, UserId

from .base import InMemoryTable


class InMemoryCommentRepository(InMemoryTable[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stored = comment.model_copy(update={"id": CommentId(self._next_id())})
        self._rows[stored.id] = stored
        return stored

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._rows.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, oldest first."""
        comments = [c for c in self._rows.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.id)
        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment."""
        comments = [
            c for c in self._rows.values() if c.comment_parent_id == parent_id
        ]
        comments.sort(key=lambda c: c.id)
        return comments

    async def find_by_user(self, user_id: UserId) -> list[Comment]:
        """Find all comments written by a user."""
        return [c for c in self._rows.values() if c.user_id == user_id]

    async def clear_user(self, user_id: UserId) -> int:
        """Set user_id to None on all of a user's comments."""
        comments = await self.find_by_user(user_id)
        for comment in comments:
            self._rows[comment.id] = comment.model_copy(update={"user_id": None})
        return len(comments)

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._rows.pop(comment_id, None) is not None
