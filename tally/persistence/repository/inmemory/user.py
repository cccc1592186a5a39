"""In-memory user repository for testing."""

from typing import Optional

from tally.domain.model.user import User
from tally.domain.repository.error import ConstraintViolationError
from tally.domain.repository.user import UserRepository
from tally.domain.value import SlackId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_slack_id(self, slack_id: SlackId) -> Optional[User]:
        """Find a user by their Slack identity."""
        return self._db.users.get(slack_id)

    async def add(self, user: User) -> None:
        """Insert a user.

        Raises:
            ConstraintViolationError: If the slack_id is already taken
        """
        if user.slack_id in self._db.users:
            raise ConstraintViolationError("uq_users_slack_id")
        self._db.users[user.slack_id] = user

    async def increment_vote_count(self, slack_id: SlackId, limit: int) -> bool:
        """Increment the user's vote count by 1, up to a limit."""
        user = self._db.users.get(slack_id)
        if not user or user.vote_count >= limit:
            return False
        self._db.users[slack_id] = user.model_copy(
            update={"vote_count": user.vote_count + 1}
        )
        return True
