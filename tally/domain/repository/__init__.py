"""Repository interfaces for Tally domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tally.domain.repository.error import ConstraintViolationError, RepositoryError
from tally.domain.repository.submission import SubmissionRepository
from tally.domain.repository.transaction import TransactionManager
from tally.domain.repository.user import UserRepository
from tally.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "SubmissionRepository",
    "VoteRepository",
    "TransactionManager",
    "RepositoryError",
    "ConstraintViolationError",
]
