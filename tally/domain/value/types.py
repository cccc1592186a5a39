"""Domain value objects for Tally."""

from tally.domain.value.common import ValueObject
from tally.domain.value.identifiers import Category, SlackId, SubmissionId


class Ballot(ValueObject):
    """A single ballot as cast by a user.

    Carries the external identifiers only; internal keys are resolved
    by the registrars.
    """

    submission_id: SubmissionId
    slack_id: SlackId
    hashed_slack_id: str
    category: Category
