"""In-memory submission repository for testing."""

from typing import Optional

from tally.domain.model.submission import Submission
from tally.domain.repository.error import ConstraintViolationError
from tally.domain.repository.submission import SubmissionRepository
from tally.domain.value import Category, SubmissionId, SubmissionKey

from .database import InMemoryDatabase


class InMemorySubmissionRepository(SubmissionRepository):
    """In-memory implementation of SubmissionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_submission_id(
        self, submission_id: SubmissionId, category: Category
    ) -> Optional[Submission]:
        """Find a submission by external id and category."""
        for submission in self._db.submissions.values():
            if (
                submission.submission_id == submission_id
                and submission.category == category
            ):
                return submission
        return None

    async def add(self, submission: Submission) -> None:
        """Insert a submission.

        Raises:
            ConstraintViolationError: If (submission_id, category) is already taken
        """
        existing = await self.find_by_submission_id(
            submission.submission_id, submission.category
        )
        if existing:
            raise ConstraintViolationError("uq_submission_category")
        self._db.submissions[submission.id] = submission

    async def increment_votes(self, submission_key: SubmissionKey) -> None:
        """Increment votes by 1."""
        submission = self._db.submissions.get(submission_key)
        if submission:
            self._db.submissions[submission_key] = submission.model_copy(
                update={"votes": submission.votes + 1}
            )
