"""Mappers for converting between database rows and domain models.

Column names follow the storage schema (`hashed_slackid`, `timestamp`,
`votes.submission_id`), which differ from the domain field names.
"""

from typing import Any, Dict
from uuid import UUID

from tally.domain.model import Submission, User, Vote
from tally.domain.value import (
    Category,
    SlackId,
    SubmissionId,
    SubmissionKey,
    UserKey,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserKey(_as_uuid(row["id"])),
        slack_id=SlackId(row["slack_id"]),
        hashed_slack_id=row["hashed_slackid"],
        username=row["username"],
        vote_count=row["vote_count"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "slack_id": user.slack_id,
        "hashed_slackid": user.hashed_slack_id,
        "username": user.username,
        "vote_count": user.vote_count,
        "created_at": user.created_at,
    }


def row_to_submission(row: Dict[str, Any]) -> Submission:
    """Convert database row to Submission domain model."""
    return Submission(
        id=SubmissionKey(_as_uuid(row["id"])),
        submission_id=SubmissionId(row["submission_id"]),
        category=Category(row["category"]),
        votes=row["votes"],
        created_at=row["created_at"],
    )


def submission_to_dict(submission: Submission) -> Dict[str, Any]:
    """Convert Submission domain model to database dict."""
    return submission.model_dump()


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "submission_id": vote.submission_key,
        "slack_id": vote.slack_id,
        "category": vote.category,
        "timestamp": vote.created_at,
    }
