"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from udiddit.domain.model import User
from udiddit.domain.repository import UserRepository
from udiddit.domain.value import UserId, Username
from udiddit.persistence.mappers import row_to_user, user_to_dict
from udiddit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, user: User) -> User:
        """Insert a user inside a savepoint.

        Args:
            user: User to insert

        Returns:
            Stored user with id and timestamps from the database
        """
        stmt = insert(users_table).values(**user_to_dict(user)).returning(users_table)
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_user(dict(result.mappings().one()))

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def count(self) -> int:
        """Count all users."""
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar_one()

    async def rename(self, user_id: UserId, username: Username) -> Optional[User]:
        """Rename a user and refresh ``username_updated`` in the same UPDATE.

        SET expressions see the old row, so the timestamp only moves when the
        username actually differs.
        """
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(
                username=username.root,
                username_updated=case(
                    (users_table.c.username != username.root, func.now()),
                    else_=users_table.c.username_updated,
                ),
            )
            .returning(users_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user row."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
