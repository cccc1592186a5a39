"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from tally.domain.error import DuplicateVoteError, VoteLimitReachedError
from tally.domain.model import Submission, Vote
from tally.domain.repository import (
    ConstraintViolationError,
    SubmissionRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from tally.domain.value import SlackId, VoteId

from .base import Service


class VoteService(Service):
    """Domain service for the vote ledger."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        submission_repository: SubmissionRepository,
        user_repository: UserRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            submission_repository: Submission repository
            user_repository: User repository
            transaction_manager: Unit of work for the ledger writes
        """
        self.vote_repository = vote_repository
        self.submission_repository = submission_repository
        self.user_repository = user_repository
        self.transaction_manager = transaction_manager

    async def has_voted(self, submission: Submission, slack_id: SlackId) -> bool:
        """Check if the user already voted for the submission in its category.

        Args:
            submission: Submission being voted for
            slack_id: Voter identity

        Returns:
            True if a vote exists for (submission, user, category)
        """
        return await self.vote_repository.exists(
            submission.id, slack_id, submission.category
        )

    async def record_vote(
        self, submission: Submission, slack_id: SlackId, vote_limit: int
    ) -> Vote:
        """Record a vote and bump both denormalized counters.

        The vote insert and the two counter updates form one unit of work:
        if any step fails, none of them is kept.

        Args:
            submission: Submission being voted for
            slack_id: Voter identity
            vote_limit: Maximum number of votes per user

        Returns:
            The recorded vote

        Raises:
            DuplicateVoteError: If a concurrent request recorded the same vote
            VoteLimitReachedError: If a concurrent request used the last vote
        """
        with logfire.span(
            "record_vote",
            submission_id=submission.submission_id,
            slack_id=slack_id,
            category=submission.category,
        ):
            vote = Vote(
                id=VoteId(uuid4()),
                submission_key=submission.id,
                slack_id=slack_id,
                category=submission.category,
                created_at=datetime.now(),
            )

            async with self.transaction_manager.atomic():
                try:
                    saved_vote = await self.vote_repository.save(vote)
                except ConstraintViolationError:
                    logfire.warn(
                        "Duplicate vote attempt",
                        slack_id=slack_id,
                        submission_id=submission.submission_id,
                        category=submission.category,
                    )
                    raise DuplicateVoteError(
                        slack_id, submission.submission_id, submission.category
                    )

                await self.submission_repository.increment_votes(submission.id)
                logfire.info(
                    "Submission vote count updated",
                    submission_id=submission.submission_id,
                    category=submission.category,
                )

                incremented = await self.user_repository.increment_vote_count(
                    slack_id, vote_limit
                )
                if not incremented:
                    logfire.warn("Vote limit reached during commit", slack_id=slack_id)
                    raise VoteLimitReachedError(slack_id, vote_limit)
                logfire.info("User vote count updated", slack_id=slack_id)

            return saved_vote
