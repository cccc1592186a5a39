"""Unit tests for row/model mappers."""

from datetime import datetime
from uuid import uuid4

from tally.domain.model import Vote
from tally.domain.value import Category, SlackId, SubmissionKey, VoteId
from tally.persistence.mappers import (
    row_to_submission,
    row_to_user,
    submission_to_dict,
    user_to_dict,
    vote_to_dict,
)
from tests.conftest import make_submission, make_user


class TestUserMapping:
    """User rows use the hashed_slackid column name."""

    def test_user_to_dict_uses_column_names(self):
        user = make_user("U1", vote_count=2)

        row = user_to_dict(user)

        assert row["hashed_slackid"] == "hashed-U1"
        assert "hashed_slack_id" not in row
        assert row["vote_count"] == 2

    def test_row_to_user_accepts_string_ids(self):
        user = make_user("U1")
        row = user_to_dict(user)
        row["id"] = str(user.id)

        assert row_to_user(row) == user


class TestSubmissionMapping:
    def test_submission_row_has_table_columns(self):
        submission = make_submission("s1", "art", votes=3)

        row = submission_to_dict(submission)

        assert set(row) == {"id", "submission_id", "category", "votes", "created_at"}
        assert row_to_submission(row) == submission


class TestVoteMapping:
    """Vote rows store the surrogate submission key and a timestamp."""

    def test_vote_to_dict_uses_column_names(self):
        key = SubmissionKey(uuid4())
        created_at = datetime(2024, 5, 1, 12, 0, 0)
        vote = Vote(
            id=VoteId(uuid4()),
            submission_key=key,
            slack_id=SlackId("U1"),
            category=Category("art"),
            created_at=created_at,
        )

        row = vote_to_dict(vote)

        assert row["submission_id"] == key
        assert row["timestamp"] == created_at
        assert row["slack_id"] == "U1"
        assert set(row) == {"id", "submission_id", "slack_id", "category", "timestamp"}
