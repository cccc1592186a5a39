"""Submission aggregate root.

A submission is scoped to a category: the same external submission id
may appear in several categories, each tracked as its own record.
"""

from datetime import datetime

from pydantic import Field

from tally.domain.model.common import DomainModel
from tally.domain.value import Category, SubmissionId, SubmissionKey


class Submission(DomainModel):
    """Submission aggregate root.

    Identified by (submission_id, category); `id` is the surrogate key
    referenced by votes.
    """

    id: SubmissionKey
    submission_id: SubmissionId
    category: Category
    votes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
