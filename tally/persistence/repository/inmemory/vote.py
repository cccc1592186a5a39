"""In-memory vote repository for testing."""

from tally.domain.model.vote import Vote
from tally.domain.repository.error import ConstraintViolationError
from tally.domain.repository.vote import VoteRepository
from tally.domain.value import Category, SlackId, SubmissionKey

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def exists(
        self,
        submission_key: SubmissionKey,
        slack_id: SlackId,
        category: Category,
    ) -> bool:
        """Check whether a vote exists for the exact triple."""
        return any(
            v.submission_key == submission_key
            and v.slack_id == slack_id
            and v.category == category
            for v in self._db.votes
        )

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            ConstraintViolationError: If vote already exists (duplicate)
        """
        if await self.exists(vote.submission_key, vote.slack_id, vote.category):
            raise ConstraintViolationError("uq_vote_submission_user_category")

        self._db.votes.append(vote)
        return vote
