"""Post domain service."""

from typing import Optional

import logfire

from udiddit.domain.error import NotFoundError
from udiddit.domain.model import Post
from udiddit.domain.repository import PostRepository, TopicRepository, VoteRepository
from udiddit.domain.value import PostId, TopicId, UserId

from .base import Service
from .comment_service import CommentService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        topic_repository: TopicRepository,
        vote_repository: VoteRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            topic_repository: Topic repository
            vote_repository: Vote repository
            comment_service: Comment domain service
        """
        self.post_repository = post_repository
        self.topic_repository = topic_repository
        self.vote_repository = vote_repository
        self.comment_service = comment_service

    async def create_post(
        self,
        title: str,
        topic_id: TopicId,
        user_id: Optional[UserId] = None,
        url: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Post:
        """Create a post on an existing topic.

        Raises:
            NotFoundError: If the topic does not exist
            ValueError: If title or url/content rules are violated
        """
        with logfire.span(
            "post_service.create_post", topic_id=topic_id, user_id=user_id
        ):
            if not await self.topic_repository.find_by_id(topic_id):
                raise NotFoundError("Topic", str(topic_id))

            post = Post(
                post_title=title,
                post_url=url,
                post_content=content,
                user_id=user_id,
                topic_id=topic_id,
            )
            return await self.post_repository.add(post)

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID."""
        return await self.post_repository.find_by_id(post_id)

    async def delete_post(self, post_id: PostId) -> bool:
        """Delete a post with its comment threads and votes.

        Returns:
            True if the post existed
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            if not await self.post_repository.find_by_id(post_id):
                return False

            comments = await self.comment_service.delete_post_threads(post_id)
            votes = await self.vote_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)

            logfire.info(
                "Post deleted",
                post_id=post_id,
                comments_deleted=comments,
                votes_deleted=votes,
            )
            return True
