"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from udiddit.domain.model.user import User
from udiddit.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: User without an id

        Returns:
            The stored user with its assigned id

        Raises:
            IntegrityError: If the username is already taken
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by exact (case-sensitive) username."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass

    @abstractmethod
    async def rename(self, user_id: UserId, username: Username) -> Optional[User]:
        """Change a username and refresh ``username_updated`` in one write.

        The timestamp only moves when the username actually changes.

        Args:
            user_id: User to rename
            username: New username

        Returns:
            Updated user, or None if the user does not exist

        Raises:
            IntegrityError: If the new username is already taken
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user row.

        Callers are responsible for dissociating dependent rows first.

        Returns:
            True if a row was deleted
        """
        pass
