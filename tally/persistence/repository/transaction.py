"""PostgreSQL implementation of the unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Runs a block of writes in a savepoint of the request session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request-scoped session.

        Args:
            session: SQLAlchemy async session shared by the repositories
        """
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Commit on success, roll back to the savepoint on any error.

        Writes made earlier in the request (user and submission
        registration) are outside the savepoint and survive a rollback.
        """
        try:
            async with self.session.begin_nested():
                yield
        except Exception as e:
            logfire.warn("Transaction rollback", error=str(e))
            raise
        await self.session.commit()
