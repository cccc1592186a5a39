"""PostgreSQL implementation of Submission repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import Submission
from tally.domain.repository import SubmissionRepository
from tally.domain.value import Category, SubmissionId, SubmissionKey
from tally.persistence.mappers import row_to_submission, submission_to_dict
from tally.persistence.tables import submissions_table


class PostgresSubmissionRepository(SubmissionRepository):
    """PostgreSQL implementation of SubmissionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_submission_id(
        self, submission_id: SubmissionId, category: Category
    ) -> Optional[Submission]:
        """Find a submission by external id and category."""
        stmt = select(submissions_table).where(
            and_(
                submissions_table.c.submission_id == submission_id,
                submissions_table.c.category == category,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_submission(dict(row)) if row else None

    async def add(self, submission: Submission) -> None:
        """Insert a submission, keeping the existing row on conflict."""
        stmt = (
            insert(submissions_table)
            .values(**submission_to_dict(submission))
            .on_conflict_do_nothing(constraint="uq_submission_category")
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_votes(self, submission_key: SubmissionKey) -> None:
        """Atomically increment votes by 1."""
        stmt = (
            submissions_table.update()
            .where(submissions_table.c.id == submission_key)
            .values(votes=submissions_table.c.votes + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
