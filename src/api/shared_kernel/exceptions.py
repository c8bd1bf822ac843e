"""Error taxonomy shared by all bounded contexts.

Services raise the most specific subclass available. The presentation layer
translates these into HTTP responses (see shared_kernel.http_errors); anything
outside this hierarchy is treated as an unexpected failure.
"""


class DomainError(Exception):
    """Base class for every expected, typed failure."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist."""

    pass


class ValidationError(DomainError):
    """Raised when input violates a validation or business rule.

    Examples are blank content, a blank required field, a malformed date
    range or a user reporting themselves.
    """

    pass


class PermissionDeniedError(DomainError):
    """Raised when the actor is not allowed to perform the operation."""

    pass


class NotAMemberError(PermissionDeniedError):
    """Raised when the actor has no membership in the target group."""

    def __init__(self, message: str = "user is not a member of the group"):
        super().__init__(message)


class InsufficientRoleError(PermissionDeniedError):
    """Raised when the actor's group role is below the required role."""

    def __init__(self, message: str = "permission denied"):
        super().__init__(message)


class AlreadyExistsError(DomainError):
    """Raised when creating something that must be unique and already exists."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires an authenticated actor and has none."""

    def __init__(self, message: str = "authentication required"):
        super().__init__(message)
