"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from udiddit.domain.model.user import User
from udiddit.domain.repository.user import UserRepository
from udiddit.domain.value import UserId, Username

from .base import InMemoryTable, violation


class InMemoryUserRepository(InMemoryTable[User], UserRepository):
    """In-memory implementation of UserRepository for testing."""

    async def add(self, user: User) -> User:
        """Insert a user, enforcing username uniqueness."""
        if await self.find_by_username(user.username):
            raise violation("uq_users_username", user.username.root)
        stored = user.model_copy(update={"id": UserId(self._next_id())})
        self._rows[stored.id] = stored
        return stored

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._rows.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._rows.values():
            if user.username == username:
                return user
        return None

    async def count(self) -> int:
        """Count all users."""
        return len(self._rows)

    async def rename(self, user_id: UserId, username: Username) -> Optional[User]:
        """Rename a user through ``User.with_username``."""
        user = self._rows.get(user_id)
        if user is None:
            return None
        existing = await self.find_by_username(username)
        if existing and existing.id != user_id:
            raise violation("uq_users_username", username.root)
        updated = user.with_username(username, datetime.now())
        self._rows[user_id] = updated
        return updated

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user row."""
        return self._rows.pop(user_id, None) is not None
