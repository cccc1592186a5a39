"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import User
from tally.domain.repository import UserRepository
from tally.domain.value import SlackId
from tally.persistence.mappers import row_to_user, user_to_dict
from tally.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_slack_id(self, slack_id: SlackId) -> Optional[User]:
        """Find a user by their Slack identity.

        Args:
            slack_id: Slack identity to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.slack_id == slack_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def add(self, user: User) -> None:
        """Insert a user, keeping the existing row on a slack_id conflict.

        Args:
            user: User to insert
        """
        stmt = (
            insert(users_table)
            .values(**user_to_dict(user))
            .on_conflict_do_nothing(index_elements=[users_table.c.slack_id])
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_vote_count(self, slack_id: SlackId, limit: int) -> bool:
        """Atomically increment the user's vote count by 1, up to a limit.

        Args:
            slack_id: Slack identity of the user
            limit: Vote count that must not be exceeded

        Returns:
            True if a row was updated
        """
        stmt = (
            users_table.update()
            .where(users_table.c.slack_id == slack_id)
            .where(users_table.c.vote_count < limit)
            .values(vote_count=users_table.c.vote_count + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
