"""Repository contract errors.

Implementations translate driver-specific failures into these so the
domain layer never inspects vendor error codes.
"""


class RepositoryError(Exception):
    """Base repository error."""

    pass


class ConstraintViolationError(RepositoryError):
    """Raised when a write violates a uniqueness constraint."""

    def __init__(self, constraint: str, message: str | None = None):
        self.constraint = constraint
        super().__init__(message or f"Constraint violated: {constraint}")
