"""PostgreSQL repository implementations."""

from tally.persistence.repository.submission import PostgresSubmissionRepository
from tally.persistence.repository.transaction import PostgresTransactionManager
from tally.persistence.repository.user import PostgresUserRepository
from tally.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresSubmissionRepository",
    "PostgresVoteRepository",
    "PostgresTransactionManager",
]
