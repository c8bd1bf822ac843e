"""Membership: the link between a User and a Group."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from community.domain.value_objects import (
    AccessStatus,
    GroupId,
    GroupRole,
    MembershipId,
    UserId,
)


@dataclass
class Membership:
    """A user's membership in one group, with a role and an access status.

    ``tag`` and ``name`` are copies of the user's login and display name taken
    when the membership was created; they are not kept in sync afterwards.
    Unique per (user, group).
    """

    id: MembershipId
    group_id: GroupId
    user_id: UserId
    tag: str
    name: str
    role: GroupRole = GroupRole.STANDARD
    status: AccessStatus = AccessStatus.NORMAL
    joined_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(
        cls,
        group_id: GroupId,
        user_id: UserId,
        tag: str,
        name: str,
        role: GroupRole = GroupRole.STANDARD,
    ) -> Membership:
        """Factory for a new membership in NORMAL status."""
        return cls(
            id=MembershipId.generate(),
            group_id=group_id,
            user_id=user_id,
            tag=tag,
            name=name,
            role=role,
            status=AccessStatus.NORMAL,
        )

    def is_owner(self) -> bool:
        """Check if this member owns the group."""
        return self.role == GroupRole.OWNER

    def can_moderate(self) -> bool:
        """Moderators and owners may remove other members' content."""
        return self.role.at_least(GroupRole.MODERATOR)

    def is_restricted(self) -> bool:
        """Suspended and banned members cannot act in the group."""
        return self.status != AccessStatus.NORMAL

    def change_status(self, new_status: AccessStatus) -> None:
        self.status = new_status

    def change_role(self, new_role: GroupRole) -> None:
        self.role = new_role
