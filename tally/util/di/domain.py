"""Domain layer DI providers."""

from dishka import Scope, provide

from tally.config import VotingSettings
from tally.domain.repository import (
    SubmissionRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from tally.domain.service import SubmissionService, UserService, VoteService
from tally.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(
        self, user_repository: UserRepository, voting_settings: VotingSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            username_prefix=voting_settings.username_prefix,
        )

    @provide
    def get_submission_service(
        self, submission_repository: SubmissionRepository
    ) -> SubmissionService:
        """Provide submission domain service."""
        return SubmissionService(submission_repository=submission_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        submission_repository: SubmissionRepository,
        user_repository: UserRepository,
        transaction_manager: TransactionManager,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            submission_repository=submission_repository,
            user_repository=user_repository,
            transaction_manager=transaction_manager,
        )
