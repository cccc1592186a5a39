"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from tally.domain.model import Submission, User
from tally.domain.value import Category, SlackId, SubmissionId, SubmissionKey, UserKey

# Local-only telemetry for the test run
logfire.configure(send_to_logfire=False, console=False)


def make_user(slack_id: str = "U123", vote_count: int = 0) -> User:
    """Helper to build a user as the registrar would create it."""
    return User(
        id=UserKey(uuid4()),
        slack_id=SlackId(slack_id),
        hashed_slack_id=f"hashed-{slack_id}",
        username=f"user_{slack_id}",
        vote_count=vote_count,
        created_at=datetime.now(),
    )


def make_submission(
    submission_id: str = "s1", category: str = "art", votes: int = 0
) -> Submission:
    """Helper to build a submission as the registrar would create it."""
    return Submission(
        id=SubmissionKey(uuid4()),
        submission_id=SubmissionId(submission_id),
        category=Category(category),
        votes=votes,
        created_at=datetime.now(),
    )
