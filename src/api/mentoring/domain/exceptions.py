"""Business-rule violations raised by mentoring aggregates and services."""

from shared_kernel.exceptions import PermissionDeniedError, ValidationError


class InvalidScheduleError(ValidationError):
    """Raised when a mentorship's start is not strictly before its end."""

    def __init__(self, message: str = "start must be before end"):
        super().__init__(message)


class MentorshipUnavailableError(ValidationError):
    """Raised when acting on a concluded or cancelled mentorship."""

    pass


class MentorshipNotConcludedError(ValidationError):
    """Raised when evaluating a mentorship that has not concluded."""

    def __init__(self, message: str = "only concluded mentorships can be evaluated"):
        super().__init__(message)


class InvalidScoreError(ValidationError):
    """Raised when an evaluation score is outside 0..5."""

    pass


class NotAMentorError(PermissionDeniedError):
    """Raised when a non-mentor offers a mentorship or acts as its mentor."""

    pass


class NotAParticipantError(PermissionDeniedError):
    """Raised when someone outside a mentorship reads or writes in it."""

    def __init__(self, message: str = "user is not a participant of the mentorship"):
        super().__init__(message)
