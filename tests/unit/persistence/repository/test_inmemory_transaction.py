"""Unit tests for the in-memory unit of work."""

import pytest

from tally.domain.value import SlackId
from tally.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryTransactionManager,
    InMemoryUserRepository,
)
from tests.conftest import make_user


class TestInMemoryTransactionManager:
    @pytest.mark.asyncio
    async def test_keeps_writes_on_success(self):
        database = InMemoryDatabase()
        users = InMemoryUserRepository(database)

        async with InMemoryTransactionManager(database).atomic():
            await users.add(make_user("U1"))

        assert list(database.users) == ["U1"]

    @pytest.mark.asyncio
    async def test_rollback_keeps_writes_made_before_the_block(self):
        """Rolling back behaves like a savepoint taken on entry."""
        # Arrange
        database = InMemoryDatabase()
        users = InMemoryUserRepository(database)
        await users.add(make_user("U1"))

        # Act
        with pytest.raises(RuntimeError):
            async with InMemoryTransactionManager(database).atomic():
                await users.add(make_user("U2"))
                await users.increment_vote_count(SlackId("U1"), limit=3)
                raise RuntimeError("boom")

        # Assert
        assert list(database.users) == ["U1"]
        assert database.users[SlackId("U1")].vote_count == 0
