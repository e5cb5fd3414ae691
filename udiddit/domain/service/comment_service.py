"""Comment domain service."""

import logfire

from udiddit.domain.error import BusinessRuleViolationError, NotFoundError
from udiddit.domain.model import Comment
from udiddit.domain.repository import CommentRepository, PostRepository
from udiddit.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def add_comment(
        self,
        post_id: PostId,
        text: str,
        user_id: UserId | None = None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Comment on a post or reply to another comment.

        A reply must target an existing comment on the same post, which keeps
        every thread a tree.

        Args:
            post_id: Post ID
            text: Comment text
            user_id: Author user ID
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If post or parent comment not found
            BusinessRuleViolationError: If parent is on another post
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=post_id,
            user_id=user_id,
            parent_id=parent_id,
        ):
            if not await self.post_repository.find_by_id(post_id):
                raise NotFoundError("Post", str(post_id))

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error("Parent comment not found", parent_id=parent_id)
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise BusinessRuleViolationError(
                        "Parent comment does not belong to this post"
                    )

            comment = Comment(
                comment_text=text,
                user_id=user_id,
                post_id=post_id,
                comment_parent_id=parent_id,
            )
            return await self.comment_repository.add(comment)

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Delete a comment together with all of its descendants.

        Descendants are collected with a depth-first walk and deleted
        deepest first.

        Returns:
            Number of comments deleted (0 if the comment does not exist)
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            if not await self.comment_repository.find_by_id(comment_id):
                return 0

            subtree: list[CommentId] = []
            stack = [comment_id]
            while stack:
                current = stack.pop()
                subtree.append(current)
                children = await self.comment_repository.find_children(current)
                stack.extend(CommentId(child.id) for child in children)

            for current in reversed(subtree):
                await self.comment_repository.delete(current)

            logfire.info(
                "Comment thread deleted", comment_id=comment_id, count=len(subtree)
            )
            return len(subtree)

    async def delete_post_threads(self, post_id: PostId) -> int:
        """Delete every comment thread on a post, root by root."""
        comments = await self.comment_repository.find_by_post(post_id)
        deleted = 0
        for root in comments:
            if root.comment_parent_id is None:
                deleted += await self.delete_comment(CommentId(root.id))
        return deleted
