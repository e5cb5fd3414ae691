"""User domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from udiddit.domain.error import BusinessRuleViolationError, NotFoundError
from udiddit.domain.model import User
from udiddit.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from udiddit.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository
            comment_repository: Comment repository
            vote_repository: Vote repository
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository

    async def register_user(self, username: Username) -> User:
        """Register a new user.

        Args:
            username: Desired username

        Returns:
            Created user

        Raises:
            BusinessRuleViolationError: If the username is taken
        """
        with logfire.span("user_service.register_user", username=username.root):
            try:
                user = await self.user_repository.add(User(username=username))
            except IntegrityError:
                logfire.warn("Username already taken", username=username.root)
                raise BusinessRuleViolationError(
                    f"Username already taken: {username.root}"
                )
            logfire.info("User registered", user_id=user.id, username=username.root)
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            logfire.warn("User not found", user_id=user_id)
            raise NotFoundError("User", str(user_id))
        return user

    async def get_by_username(self, username: Username) -> User | None:
        """Get user by username."""
        return await self.user_repository.find_by_username(username)

    async def rename_user(self, user_id: UserId, username: Username) -> User:
        """Change a user's username.

        The username and ``username_updated`` change together in a single
        repository write; renaming to the current name changes nothing.

        Args:
            user_id: User to rename
            username: New username

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            BusinessRuleViolationError: If the username is taken
        """
        with logfire.span(
            "user_service.rename_user", user_id=user_id, username=username.root
        ):
            try:
                user = await self.user_repository.rename(user_id, username)
            except IntegrityError:
                logfire.warn("Username already taken", username=username.root)
                raise BusinessRuleViolationError(
                    f"Username already taken: {username.root}"
                )
            if not user:
                logfire.warn("Rename of non-existent user", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user, keeping their content.

        Posts, comments and votes stay in place with ``user_id`` cleared.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=user_id):
            await self.get_by_id(user_id)

            posts = await self.post_repository.clear_user(user_id)
            comments = await self.comment_repository.clear_user(user_id)
            votes = await self.vote_repository.clear_user(user_id)
            await self.user_repository.delete(user_id)

            logfire.info(
                "User deleted",
                user_id=user_id,
                dissociated_posts=posts,
                dissociated_comments=comments,
                dissociated_votes=votes,
            )
