"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from udiddit.domain.repository.transaction import TransactionManager

from .base import InMemoryTable


class InMemoryTransactionManager(TransactionManager):
    """Snapshots every in-memory table on begin and restores them on error."""

    def __init__(self, tables: Sequence[InMemoryTable]) -> None:
        self._tables = list(tables)

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        """Restore all snapshots if the block raises."""
        snapshots = [table.snapshot() for table in self._tables]
        try:
            yield
        except BaseException:
            for table, state in zip(self._tables, snapshots):
                table.restore(state)
            raise
