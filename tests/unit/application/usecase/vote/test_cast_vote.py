"""Unit tests for the cast vote use case."""

import pytest

from tally.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from tally.config import VotingSettings
from tally.domain.error import (
    DuplicateVoteError,
    SubmissionRegistrationError,
    UserRegistrationError,
    VoteLimitReachedError,
)
from tally.domain.service import SubmissionService, UserService, VoteService
from tally.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def make_request(
    submission_id: str = "s1", slack_id: str = "U1", category: str = "art"
) -> CastVoteRequest:
    """Helper to build a request the way the HTTP layer parses it."""
    return CastVoteRequest.model_validate(
        {
            "submissionId": submission_id,
            "slackID": slack_id,
            "hashedSlackID": f"hashed-{slack_id}",
            "category": category,
        }
    )


class NullUserService(UserService):
    """Registrar that never manages to produce a user."""

    async def ensure_user(self, slack_id, hashed_slack_id):
        return None


class NullSubmissionService(SubmissionService):
    """Registrar that never manages to produce a submission."""

    async def ensure_submission(self, submission_id, category):
        return None


class TestCastVoteRequest:
    """Tests for request parsing."""

    def test_parses_wire_field_names(self):
        """The JSON body uses camelCase keys."""
        request = make_request()

        assert request.submission_id == "s1"
        assert request.slack_id == "U1"
        assert request.hashed_slack_id == "hashed-U1"
        assert request.category == "art"

    def test_to_ballot_keeps_all_fields(self):
        """Ballot carries the external identifiers."""
        ballot = make_request().to_ballot()

        assert ballot.submission_id == "s1"
        assert ballot.slack_id == "U1"
        assert ballot.hashed_slack_id == "hashed-U1"
        assert ballot.category == "art"


class TestCastVote:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_user_submission_and_vote(self, unit_env):
        """Fresh user voting for a new submission."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        database = await unit_env.get(InMemoryDatabase)

        # Act
        response = await use_case.execute(make_request())

        # Assert
        assert response.success == "Vote submitted successfully"
        user = database.users["U1"]
        assert user.vote_count == 1
        assert user.username == "user_U1"
        assert user.hashed_slack_id == "hashed-U1"
        (submission,) = database.submissions.values()
        assert submission.submission_id == "s1"
        assert submission.category == "art"
        assert submission.votes == 1
        (vote,) = database.votes
        assert vote.submission_key == submission.id
        assert vote.slack_id == "U1"
        assert vote.category == "art"

    @pytest.mark.asyncio
    async def test_user_at_limit_is_rejected_before_submission_is_created(
        self, unit_env
    ):
        """No side effects for a user with no votes left."""
        use_case = await unit_env.get(CastVoteUseCase)
        database = await unit_env.get(InMemoryDatabase)
        user = make_user("U1", vote_count=3)
        database.users[user.slack_id] = user

        with pytest.raises(VoteLimitReachedError) as exc_info:
            await use_case.execute(make_request(submission_id="new"))

        assert str(exc_info.value) == "User U1 has reached the maximum vote count of 3"
        assert database.submissions == {}
        assert database.votes == []
        assert database.users["U1"].vote_count == 3

    @pytest.mark.asyncio
    async def test_duplicate_vote_is_rejected(self, unit_env):
        """Same user, same submission, same category."""
        use_case = await unit_env.get(CastVoteUseCase)
        database = await unit_env.get(InMemoryDatabase)
        await use_case.execute(make_request())

        with pytest.raises(DuplicateVoteError) as exc_info:
            await use_case.execute(make_request())

        assert str(exc_info.value) == (
            "User U1 has already voted for submission s1 in category art"
        )
        (submission,) = database.submissions.values()
        assert submission.votes == 1
        assert database.users["U1"].vote_count == 1
        assert len(database.votes) == 1

    @pytest.mark.asyncio
    async def test_same_submission_in_other_category_is_a_new_vote(self, unit_env):
        """Duplicate detection is scoped to the category."""
        use_case = await unit_env.get(CastVoteUseCase)
        database = await unit_env.get(InMemoryDatabase)

        await use_case.execute(make_request(category="art"))
        await use_case.execute(make_request(category="music"))

        assert len(database.submissions) == 2
        assert len(database.votes) == 2
        assert database.users["U1"].vote_count == 2

    @pytest.mark.asyncio
    async def test_fourth_vote_hits_the_limit(self, unit_env):
        """The limit applies across categories."""
        use_case = await unit_env.get(CastVoteUseCase)
        database = await unit_env.get(InMemoryDatabase)
        for category in ("a", "b", "c"):
            await use_case.execute(make_request(category=category))

        with pytest.raises(VoteLimitReachedError):
            await use_case.execute(make_request(category="d"))

        assert database.users["U1"].vote_count == 3
        assert len(database.votes) == 3
        assert {s.category for s in database.submissions.values()} == {"a", "b", "c"}

    @pytest.mark.asyncio
    async def test_limit_is_configurable(self, unit_env):
        """A lower limit from settings is honoured."""
        use_case = CastVoteUseCase(
            user_service=await unit_env.get(UserService),
            submission_service=await unit_env.get(SubmissionService),
            vote_service=await unit_env.get(VoteService),
            voting_settings=VotingSettings(max_votes_per_user=1),
        )
        await use_case.execute(make_request(category="a"))

        with pytest.raises(VoteLimitReachedError, match="maximum vote count of 1"):
            await use_case.execute(make_request(category="b"))

    @pytest.mark.asyncio
    async def test_user_registration_failure(self, unit_env):
        """A registrar returning nothing is an internal failure."""
        user_service = await unit_env.get(UserService)
        use_case = CastVoteUseCase(
            user_service=NullUserService(user_service.user_repository),
            submission_service=await unit_env.get(SubmissionService),
            vote_service=await unit_env.get(VoteService),
            voting_settings=VotingSettings(),
        )

        with pytest.raises(
            UserRegistrationError, match="Failed to ensure user exists: slackID=U1"
        ):
            await use_case.execute(make_request())

    @pytest.mark.asyncio
    async def test_submission_registration_failure(self, unit_env):
        """A submission registrar returning nothing is an internal failure."""
        database = await unit_env.get(InMemoryDatabase)
        submission_service = await unit_env.get(SubmissionService)
        use_case = CastVoteUseCase(
            user_service=await unit_env.get(UserService),
            submission_service=NullSubmissionService(
                submission_service.submission_repository
            ),
            vote_service=await unit_env.get(VoteService),
            voting_settings=VotingSettings(),
        )

        with pytest.raises(SubmissionRegistrationError) as exc_info:
            await use_case.execute(make_request())

        assert str(exc_info.value) == (
            "Failed to ensure submission exists: submissionId=s1, category=art"
        )
        assert database.votes == []
