"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tally.domain.model.user import User
from tally.domain.value import SlackId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_slack_id(self, slack_id: SlackId) -> Optional[User]:
        """Find a user by their Slack identity.

        Args:
            slack_id: The user's external identity

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a user unless one with the same slack_id exists.

        Backends with native upsert silently keep the existing row.
        Backends without it raise ConstraintViolationError on a race.

        Args:
            user: The user to insert

        Raises:
            ConstraintViolationError: If the slack_id is already taken
        """
        pass

    @abstractmethod
    async def increment_vote_count(self, slack_id: SlackId, limit: int) -> bool:
        """Atomically increment the user's vote count by 1, up to a limit.

        Args:
            slack_id: The user's external identity
            limit: Vote count that must not be exceeded

        Returns:
            True if the counter was incremented, False if the user is
            missing or already at the limit
        """
        pass
