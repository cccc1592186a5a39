"""Submission repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tally.domain.model.submission import Submission
from tally.domain.value import Category, SubmissionId, SubmissionKey


class SubmissionRepository(ABC):
    """Repository for Submission aggregate."""

    @abstractmethod
    async def find_by_submission_id(
        self, submission_id: SubmissionId, category: Category
    ) -> Optional[Submission]:
        """Find a submission by its external id within a category.

        Args:
            submission_id: External submission identifier
            category: Category the submission competes in

        Returns:
            The submission if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, submission: Submission) -> None:
        """Insert a submission unless (submission_id, category) exists.

        Args:
            submission: The submission to insert

        Raises:
            ConstraintViolationError: If the pair is already taken and the
                backend cannot ignore the conflict itself
        """
        pass

    @abstractmethod
    async def increment_votes(self, submission_key: SubmissionKey) -> None:
        """Atomically increment the submission's vote counter by 1.

        Args:
            submission_key: Surrogate key of the submission
        """
        pass
