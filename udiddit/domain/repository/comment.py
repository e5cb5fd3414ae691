"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from udiddit.domain.model.comment import Comment
from udiddit.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Raises:
            IntegrityError: If a storage constraint rejects the row
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, at any depth, oldest first."""
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of direct child comments
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Comment]:
        """Find all comments written by a user."""
        pass

    @abstractmethod
    async def clear_user(self, user_id: UserId) -> int:
        """Dissociate all comments from a user (set user_id to NULL)."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment row.

        Callers are responsible for deleting replies first.
        """
        pass
