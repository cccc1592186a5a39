"""Domain value objects for Tally."""

from tally.domain.value.identifiers import (
    Category,
    SlackId,
    SubmissionId,
    SubmissionKey,
    UserKey,
    VoteId,
)
from tally.domain.value.types import Ballot

__all__ = [
    # Identifiers
    "UserKey",
    "SubmissionKey",
    "VoteId",
    "SlackId",
    "SubmissionId",
    "Category",
    # Types
    "Ballot",
]
