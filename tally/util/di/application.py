"""Application layer DI providers."""

from dishka import Scope, provide

from tally.application.usecase.vote import CastVoteUseCase
from tally.config import VotingSettings
from tally.domain.service import SubmissionService, UserService, VoteService
from tally.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        user_service: UserService,
        submission_service: SubmissionService,
        vote_service: VoteService,
        voting_settings: VotingSettings,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            user_service=user_service,
            submission_service=submission_service,
            vote_service=vote_service,
            voting_settings=voting_settings,
        )
