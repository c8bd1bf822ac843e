"""Business-rule violations raised by community aggregates."""

from shared_kernel.exceptions import PermissionDeniedError, ValidationError


class EmptyContentError(ValidationError):
    """Raised when post or comment content is missing or blank."""

    pass


class ContentTooLongError(ValidationError):
    """Raised when content exceeds its configured maximum length."""

    pass


class InvalidGroupNameError(ValidationError):
    """Raised when a group name is blank or longer than 255 characters."""

    pass


class GroupClosedError(ValidationError):
    """Raised when joining a group that has been closed by its owner."""

    pass


class OwnerCannotLeaveError(ValidationError):
    """Raised when the group owner tries to leave without transferring ownership."""

    def __init__(
        self, message: str = "owner must transfer ownership before leaving"
    ):
        super().__init__(message)


class SelfReportError(ValidationError):
    """Raised when a user files a report against themselves."""

    def __init__(self, message: str = "a user cannot report themselves"):
        super().__init__(message)


class ReportAlreadyResolvedError(ValidationError):
    """Raised when resolving a report that is already resolved.

    RESOLVED is terminal; no transition leaves it.
    """

    pass


class UnchangedStatusError(ValidationError):
    """Raised when an account status update would not change anything."""

    pass


class AccountRestrictedError(PermissionDeniedError):
    """Raised when a suspended or banned account tries to act."""

    pass


class MembershipRestrictedError(PermissionDeniedError):
    """Raised when a suspended or banned member tries to act in a group."""

    pass
