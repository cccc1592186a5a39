"""Domain services."""

from .base import Service
from .submission_service import SubmissionService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "Service",
    "SubmissionService",
    "UserService",
    "VoteService",
]
