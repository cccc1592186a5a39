"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository writes into one all-or-nothing unit.

    Usage:
        async with transaction_manager.atomic():
            await vote_repository.save(vote)
            await submission_repository.increment_votes(vote.submission_key)
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic unit of work.

        Writes made inside the block are committed when it exits normally
        and discarded when it raises.
        """
        pass
