"""User aggregate root.

Users are identified by their Slack identity and are registered
implicitly the first time they vote.
"""

from datetime import datetime

from pydantic import Field

from tally.domain.model.common import DomainModel
from tally.domain.value import SlackId, UserKey


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - slack_id is unique (enforced by database unique constraint)
    - vote_count equals the number of votes owned by the user
    - vote_count never exceeds the configured vote limit
    """

    id: UserKey
    slack_id: SlackId
    hashed_slack_id: str
    username: str
    vote_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
