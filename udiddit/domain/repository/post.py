"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from udiddit.domain.model.post import Post
from udiddit.domain.value import PostId, TopicId, UserId


class PostRepository(ABC):
    """Repository for Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def add(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: Post without an id

        Returns:
            The stored post with its assigned id

        Raises:
            IntegrityError: If a storage constraint rejects the row
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId) -> List[Post]:
        """Find all posts filed under a topic."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Post]:
        """Find all posts written by a user."""
        pass

    @abstractmethod
    async def clear_user(self, user_id: UserId) -> int:
        """Dissociate all posts from a user (set user_id to NULL).

        Returns:
            Number of posts updated
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post row.

        Callers are responsible for deleting comments and votes first.
        """
        pass
