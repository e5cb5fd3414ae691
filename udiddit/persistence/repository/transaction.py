"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from udiddit.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Runs a unit of work as one database transaction on the request session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        """Commit on normal exit, roll back and re-raise on error.

        If the session already has a transaction open, the unit of work runs
        in a savepoint and the outer transaction's owner decides the commit.
        """
        if self.session.in_transaction():
            async with self.session.begin_nested():
                yield
        else:
            async with self.session.begin():
                yield
