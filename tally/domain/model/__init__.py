"""Domain model entities for Tally."""

from tally.domain.model.submission import Submission
from tally.domain.model.user import User
from tally.domain.model.vote import Vote

__all__ = [
    "User",
    "Submission",
    "Vote",
]
