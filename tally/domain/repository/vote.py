"""Vote repository interface."""

from abc import ABC, abstractmethod
from tally.domain.model.vote import Vote
from tally.domain.value import Category, SlackId, SubmissionKey


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def exists(
        self,
        submission_key: SubmissionKey,
        slack_id: SlackId,
        category: Category,
    ) -> bool:
        """Check whether a vote exists for the exact triple.

        Args:
            submission_key: Surrogate key of the submission
            slack_id: The voter's identity
            category: Category of the vote

        Returns:
            True if a vote already exists
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            ConstraintViolationError: If a vote already exists for the triple
        """
        pass
