"""Submission domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from tally.domain.model import Submission
from tally.domain.repository import ConstraintViolationError, SubmissionRepository
from tally.domain.value import Category, SubmissionId, SubmissionKey

from .base import Service


class SubmissionService(Service):
    """Domain service for submission operations."""

    def __init__(self, submission_repository: SubmissionRepository) -> None:
        """Initialize submission service.

        Args:
            submission_repository: Submission repository
        """
        self.submission_repository = submission_repository

    async def ensure_submission(
        self, submission_id: SubmissionId, category: Category
    ) -> Optional[Submission]:
        """Return the submission for (submission_id, category), creating it if absent.

        Always finishes with a fresh read so the caller gets the live vote
        count and the surrogate key of the stored row.

        Args:
            submission_id: External submission identifier
            category: Category the submission competes in

        Returns:
            The persisted submission, or None if it could not be read back
        """
        with logfire.span(
            "submission_service.ensure_submission",
            submission_id=submission_id,
            category=category,
        ):
            submission = await self.submission_repository.find_by_submission_id(
                submission_id, category
            )
            if submission:
                logfire.info(
                    "Submission found",
                    submission_id=submission_id,
                    category=category,
                    votes=submission.votes,
                )
                return submission

            logfire.info(
                "Submission not found, creating",
                submission_id=submission_id,
                category=category,
            )
            try:
                await self.submission_repository.add(
                    Submission(
                        id=SubmissionKey(uuid4()),
                        submission_id=submission_id,
                        category=category,
                        votes=0,
                    )
                )
            except ConstraintViolationError:
                logfire.warn(
                    "Submission created by concurrent request",
                    submission_id=submission_id,
                    category=category,
                )

            submission = await self.submission_repository.find_by_submission_id(
                submission_id, category
            )
            if not submission:
                logfire.error(
                    "Submission missing after insert",
                    submission_id=submission_id,
                    category=category,
                )
            return submission
