"""Value objects for the community domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from shared_kernel.identifiers import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Identifier for a User aggregate."""


@dataclass(frozen=True)
class ProfileId(EntityId):
    """Identifier for a Profile."""


@dataclass(frozen=True)
class GroupId(EntityId):
    """Identifier for a Group aggregate."""


@dataclass(frozen=True)
class MembershipId(EntityId):
    """Identifier for a Membership."""


@dataclass(frozen=True)
class PostId(EntityId):
    """Identifier for a Post."""


@dataclass(frozen=True)
class CommentId(EntityId):
    """Identifier for a Comment."""


@dataclass(frozen=True)
class ReportId(EntityId):
    """Identifier for a Report."""


@dataclass(frozen=True)
class NotificationId(EntityId):
    """Identifier for a Notification."""


class AuthorizationLevel(StrEnum):
    """System-wide authorization level of a user account."""

    STANDARD = "standard"
    ADMIN = "admin"


class AccountStatus(StrEnum):
    """Status of a user account.

    Only NORMAL accounts may act; SUSPENDED and BANNED accounts are rejected
    when the request identity is resolved.
    """

    NORMAL = "normal"
    SUSPENDED = "suspended"
    BANNED = "banned"


class GroupRole(StrEnum):
    """Roles for group membership.

    The privilege order is defined by ``privilege``, not by declaration order,
    so reordering members of this enum never changes authorization results.
    """

    STANDARD = "standard"
    MODERATOR = "moderator"
    OWNER = "owner"

    @property
    def privilege(self) -> int:
        """Numeric privilege level (higher is more privileged)."""
        return _ROLE_PRIVILEGE[self]

    def at_least(self, other: GroupRole) -> bool:
        """Check whether this role is as privileged as ``other`` or more."""
        return self.privilege >= other.privilege

    def outranks(self, other: GroupRole) -> bool:
        """Check whether this role is strictly more privileged than ``other``."""
        return self.privilege > other.privilege


_ROLE_PRIVILEGE: dict[GroupRole, int] = {
    GroupRole.STANDARD: 10,
    GroupRole.MODERATOR: 20,
    GroupRole.OWNER: 30,
}


class AccessStatus(StrEnum):
    """Access status of a member within one group."""

    NORMAL = "normal"
    SUSPENDED = "suspended"
    BANNED = "banned"


class ReportStatus(StrEnum):
    """Lifecycle of a report: PENDING -> RESOLVED (terminal)."""

    PENDING = "pending"
    RESOLVED = "resolved"
