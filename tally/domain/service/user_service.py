"""User domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from tally.domain.model import User
from tally.domain.repository import ConstraintViolationError, UserRepository
from tally.domain.value import SlackId, UserKey

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        username_prefix: str = "user_",
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            username_prefix: Prefix of the default username for new users
        """
        self.user_repository = user_repository
        self.username_prefix = username_prefix

    def default_username(self, slack_id: SlackId) -> str:
        """Derive the display name given to a newly registered user."""
        return f"{self.username_prefix}{slack_id}"

    async def ensure_user(
        self, slack_id: SlackId, hashed_slack_id: str
    ) -> Optional[User]:
        """Return the user for a Slack identity, registering it if absent.

        An existing user is returned as-is. Otherwise a user with zero votes
        is inserted and the row is read back, so the returned vote count is
        the live value even when a concurrent request created the user first.

        Args:
            slack_id: External identity
            hashed_slack_id: Hashed form of the identity

        Returns:
            The persisted user, or None if it could not be read back
        """
        with logfire.span("user_service.ensure_user", slack_id=slack_id):
            user = await self.user_repository.find_by_slack_id(slack_id)
            if user:
                logfire.info("User found", slack_id=slack_id, vote_count=user.vote_count)
                return user

            logfire.info("User not found, creating", slack_id=slack_id)
            try:
                await self.user_repository.add(
                    User(
                        id=UserKey(uuid4()),
                        slack_id=slack_id,
                        hashed_slack_id=hashed_slack_id,
                        username=self.default_username(slack_id),
                        vote_count=0,
                    )
                )
            except ConstraintViolationError:
                logfire.warn(
                    "User created by concurrent request", slack_id=slack_id
                )

            user = await self.user_repository.find_by_slack_id(slack_id)
            if not user:
                logfire.error("User missing after insert", slack_id=slack_id)
            return user
