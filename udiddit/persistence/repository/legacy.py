"""PostgreSQL implementation of the legacy source."""

from typing import AsyncIterator

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from udiddit.domain.model import LegacyComment, LegacyPost
from udiddit.domain.repository import LegacySource
from udiddit.persistence.mappers import row_to_legacy_comment, row_to_legacy_post
from udiddit.persistence.tables import bad_comments_table, bad_posts_table


class PostgresLegacySource(LegacySource):
    """Reads ``bad_posts`` and ``bad_comments`` through the migration session.

    Each pass fetches the full table before yielding, so the session is free
    for inserts while the caller iterates.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def iter_posts(self) -> AsyncIterator[LegacyPost]:
        """Iterate over legacy posts in id order."""
        stmt = select(bad_posts_table).order_by(bad_posts_table.c.id)
        result = await self.session.execute(stmt)
        for row in result.mappings().all():
            yield row_to_legacy_post(dict(row))

    async def iter_comments(self) -> AsyncIterator[LegacyComment]:
        """Iterate over legacy comments in id order."""
        stmt = select(bad_comments_table).order_by(bad_comments_table.c.id)
        result = await self.session.execute(stmt)
        for row in result.mappings().all():
            yield row_to_legacy_comment(dict(row))
