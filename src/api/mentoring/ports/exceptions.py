"""Lookup and uniqueness errors raised through mentoring repositories."""

from shared_kernel.exceptions import AlreadyExistsError, NotFoundError


class MentorshipNotFoundError(NotFoundError):
    """Raised when a mentorship does not exist."""

    pass


class AlreadyParticipantError(AlreadyExistsError):
    """Raised when a user joins a mentorship they already take part in."""

    def __init__(self, message: str = "user already takes part in this mentorship"):
        super().__init__(message)


class DuplicateEvaluationError(AlreadyExistsError):
    """Raised when a user evaluates the same mentorship twice."""

    def __init__(self, message: str = "user has already evaluated this mentorship"):
        super().__init__(message)
