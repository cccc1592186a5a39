"""In-memory unit of work for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from tally.domain.repository.transaction import TransactionManager

from .database import InMemoryDatabase


class InMemoryTransactionManager(TransactionManager):
    """Restores a snapshot of the in-memory tables when the block raises.

    The snapshot is taken on entry, so writes made before the block are kept,
    like a savepoint. Restoring replaces whole tables: a write committed by
    another request sharing the same InMemoryDatabase while the block runs is
    lost too. Tests that need concurrent writers use the PostgreSQL backend.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Keep writes on success, discard them on any error."""
        snapshot = self._db.snapshot()
        try:
            yield
        except Exception:
            self._db.restore(snapshot)
            raise
