"""Vote entity.

A vote is one user's ballot for one submission within one category.
"""

from datetime import datetime

from pydantic import Field

from tally.domain.model.common import DomainModel
from tally.domain.value import Category, SlackId, SubmissionKey, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (submission, user, category) (enforced by database unique constraint)
    - Immutable once recorded
    - References the submission by surrogate key and the user by slack_id
    """

    id: VoteId
    submission_key: SubmissionKey
    slack_id: SlackId
    category: Category
    created_at: datetime = Field(default_factory=datetime.now)
