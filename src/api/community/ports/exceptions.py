"""Lookup and persistence errors for the community bounded context.

Repositories raise the AlreadyExists subtypes when a unique constraint
fires; services raise the NotFound subtypes when a referenced aggregate
cannot be loaded. Both are translated to HTTP responses at the
presentation boundary.
"""

from shared_kernel.exceptions import AlreadyExistsError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user cannot be found by id or login."""

    pass


class ProfileNotFoundError(NotFoundError):
    """Raised when a user has no profile."""

    pass


class GroupNotFoundError(NotFoundError):
    """Raised when a group cannot be found."""

    pass


class MembershipNotFoundError(NotFoundError):
    """Raised when a membership does not exist or belongs to another group."""

    pass


class PostNotFoundError(NotFoundError):
    """Raised when a post cannot be found."""

    pass


class CommentNotFoundError(NotFoundError):
    """Raised when a comment cannot be found."""

    pass


class ReportNotFoundError(NotFoundError):
    """Raised when a report cannot be found."""

    pass


class NotificationNotFoundError(NotFoundError):
    """Raised when a notification cannot be found."""

    pass


class DuplicateLoginError(AlreadyExistsError):
    """Raised when registering a login that is already taken.

    Logins are compared after case normalization, so "Ana" and "ana" collide.
    """

    pass


class AlreadyMemberError(AlreadyExistsError):
    """Raised when a user joins a group they already belong to.

    Also raised by the membership repository when the (user, group) unique
    constraint fires under a concurrent join.
    """

    pass
