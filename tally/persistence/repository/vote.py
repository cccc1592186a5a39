"""PostgreSQL implementation of Vote repository."""

from sqlalchemy import and_, exists, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import Vote
from tally.domain.repository import ConstraintViolationError, VoteRepository
from tally.domain.value import Category, SlackId, SubmissionKey
from tally.persistence.mappers import vote_to_dict
from tally.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(
        self,
        submission_key: SubmissionKey,
        slack_id: SlackId,
        category: Category,
    ) -> bool:
        """Check whether a vote exists for the exact triple."""
        stmt = select(
            exists().where(
                and_(
                    votes_table.c.submission_id == submission_key,
                    votes_table.c.slack_id == slack_id,
                    votes_table.c.category == category,
                )
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The insert runs in a savepoint so a duplicate leaves the
        surrounding transaction usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConstraintViolationError(
                "uq_vote_submission_user_category", str(e.orig)
            ) from e
        return vote
