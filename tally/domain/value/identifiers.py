"""Strongly typed identifiers for Tally domain entities.

Using NewType for strong typing prevents mixing up internal surrogate keys
with the external identifiers supplied by callers.
"""

from typing import NewType
from uuid import UUID

# Internal surrogate keys
UserKey = NewType("UserKey", UUID)
SubmissionKey = NewType("SubmissionKey", UUID)
VoteId = NewType("VoteId", UUID)

# External identifiers supplied with each vote
SlackId = NewType("SlackId", str)
SubmissionId = NewType("SubmissionId", str)
Category = NewType("Category", str)
