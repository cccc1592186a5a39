"""Cast vote use case."""

import logfire
from pydantic import BaseModel, ConfigDict, Field

from tally.application.usecase.base import BaseUseCase
from tally.config import VotingSettings
from tally.domain.error import (
    DuplicateVoteError,
    SubmissionRegistrationError,
    UserRegistrationError,
    VoteLimitReachedError,
)
from tally.domain.service import SubmissionService, UserService, VoteService
from tally.domain.value import Ballot, Category, SlackId, SubmissionId


class CastVoteRequest(BaseModel):
    """Cast vote request.

    Field aliases match the JSON body sent by the voting client.
    """

    model_config = ConfigDict(populate_by_name=True)

    submission_id: str = Field(alias="submissionId", min_length=1)
    slack_id: str = Field(alias="slackID", min_length=1)
    hashed_slack_id: str = Field(alias="hashedSlackID", min_length=1)
    category: str = Field(min_length=1)

    def to_ballot(self) -> Ballot:
        """Convert to the domain ballot."""
        return Ballot(
            submission_id=SubmissionId(self.submission_id),
            slack_id=SlackId(self.slack_id),
            hashed_slack_id=self.hashed_slack_id,
            category=Category(self.category),
        )


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: str = "Vote submitted successfully"


class CastVoteUseCase(BaseUseCase):
    """Use case for casting a vote for a submission in a category."""

    def __init__(
        self,
        user_service: UserService,
        submission_service: SubmissionService,
        vote_service: VoteService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            user_service: User domain service
            submission_service: Submission domain service
            vote_service: Vote domain service
            voting_settings: Voting rules
        """
        self.user_service = user_service
        self.submission_service = submission_service
        self.vote_service = vote_service
        self.voting_settings = voting_settings

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Success response

        Raises:
            UserRegistrationError: If the user record could not be ensured
            VoteLimitReachedError: If the user has no votes left
            SubmissionRegistrationError: If the submission record could not be ensured
            DuplicateVoteError: If the user already voted for this submission
        """
        ballot = request.to_ballot()
        limit = self.voting_settings.max_votes_per_user

        with logfire.span(
            "cast_vote",
            submission_id=ballot.submission_id,
            slack_id=ballot.slack_id,
            category=ballot.category,
        ):
            user = await self.user_service.ensure_user(
                ballot.slack_id, ballot.hashed_slack_id
            )
            if not user:
                raise UserRegistrationError(ballot.slack_id)

            # Checked before the submission is touched so a rejected user
            # leaves no side effects
            if user.vote_count >= limit:
                logfire.warn(
                    "Vote limit reached",
                    slack_id=ballot.slack_id,
                    vote_count=user.vote_count,
                )
                raise VoteLimitReachedError(ballot.slack_id, limit)

            submission = await self.submission_service.ensure_submission(
                ballot.submission_id, ballot.category
            )
            if not submission:
                raise SubmissionRegistrationError(ballot.submission_id, ballot.category)

            if await self.vote_service.has_voted(submission, ballot.slack_id):
                logfire.warn(
                    "Duplicate vote",
                    slack_id=ballot.slack_id,
                    submission_id=ballot.submission_id,
                    category=ballot.category,
                )
                raise DuplicateVoteError(
                    ballot.slack_id, ballot.submission_id, ballot.category
                )

            await self.vote_service.record_vote(submission, ballot.slack_id, limit)
            logfire.info(
                "Vote recorded",
                submission_id=ballot.submission_id,
                slack_id=ballot.slack_id,
                category=ballot.category,
            )

        return CastVoteResponse()
