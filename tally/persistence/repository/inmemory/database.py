"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from tally.domain.model import Submission, User, Vote
from tally.domain.value import SlackId, SubmissionKey


@dataclass
class InMemoryDatabase:
    """Tables of the in-memory backend.

    One instance is shared by all repositories of a container so that
    writes made in one request are visible to the next.
    """

    users: dict[SlackId, User] = field(default_factory=dict)
    submissions: dict[SubmissionKey, Submission] = field(default_factory=dict)
    votes: list[Vote] = field(default_factory=list)

    def snapshot(self) -> "InMemoryDatabase":
        """Copy the tables (rows are immutable, so a shallow copy is enough)."""
        return InMemoryDatabase(
            users=dict(self.users),
            submissions=dict(self.submissions),
            votes=list(self.votes),
        )

    def restore(self, snapshot: "InMemoryDatabase") -> None:
        """Replace table contents with a previous snapshot."""
        self.users = snapshot.users
        self.submissions = snapshot.submissions
        self.votes = snapshot.votes
