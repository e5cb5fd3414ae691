"""In-memory post repository for testing."""

from typing import Optional

from udiddit.domain.model.post import Post
from udiddit.domain.repository.post import PostRepository
from udiddit.domain.value import PostId, TopicId, UserId

from .base import InMemoryTable


class InMemoryPostRepository(InMemoryTable[Post], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    async def add(self, post: Post) -> Post:
        """Insert a post."""
        stored = post.model_copy(update={"id": PostId(self._next_id())})
        self._rows[stored.id] = stored
        return stored

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._rows.get(post_id)

    async def find_by_topic(self, topic_id: TopicId) -> list[Post]:
        """Find all posts filed under a topic."""
        return [p for p in self._rows.values() if p.topic_id == topic_id]

    async def find_by_user(self, user_id: UserId) -> list[Post]:
        """Find all posts written by a user."""
        return [p for p in self._rows.values() if p.user_id == user_id]

    async def clear_user(self, user_id: UserId) -> int:
        """Set user_id to None on all of a user's posts."""
        posts = await self.find_by_user(user_id)
        for post in posts:
            self._rows[post.id] = post.model_copy(update={"user_id": None})
        return len(posts)

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._rows.pop(post_id, None) is not None
