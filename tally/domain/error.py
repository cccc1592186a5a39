"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class VoteLimitReachedError(BusinessRuleViolationError):
    """Raised when a user has already cast the maximum number of votes."""

    def __init__(self, slack_id: str, limit: int):
        self.slack_id = slack_id
        self.limit = limit
        super().__init__(
            f"User {slack_id} has reached the maximum vote count of {limit}"
        )


class DuplicateVoteError(BusinessRuleViolationError):
    """Raised when a user votes twice for the same submission in a category."""

    def __init__(self, slack_id: str, submission_id: str, category: str):
        self.slack_id = slack_id
        self.submission_id = submission_id
        self.category = category
        super().__init__(
            f"User {slack_id} has already voted for submission {submission_id} "
            f"in category {category}"
        )


class RegistrationError(DomainError):
    """Raised when a registrar could not produce a persisted record."""

    pass


class UserRegistrationError(RegistrationError):
    """Raised when a user record could not be ensured."""

    def __init__(self, slack_id: str):
        self.slack_id = slack_id
        super().__init__(f"Failed to ensure user exists: slackID={slack_id}")


class SubmissionRegistrationError(RegistrationError):
    """Raised when a submission record could not be ensured."""

    def __init__(self, submission_id: str, category: str):
        self.submission_id = submission_id
        self.category = category
        super().__init__(
            f"Failed to ensure submission exists: submissionId={submission_id}, "
            f"category={category}"
        )
