"""Pydantic models for group API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from community.domain.aggregates import Group, Membership
from community.domain.value_objects import AccessStatus, GroupRole


class CreateGroupRequest(BaseModel):
    """Request model for creating a group. The creator becomes its owner."""

    name: str = Field(..., description="Group name")
    description: str | None = Field(default=None, description="Group description")


class UpdateGroupRequest(BaseModel):
    """Request model for updating group metadata.

    Only the fields that are present are changed.
    """

    name: str | None = Field(default=None, description="New group name")
    description: str | None = Field(default=None, description="New description")
    active: bool | None = Field(
        default=None, description="Whether the group accepts new members"
    )


class UpdateMemberStatusRequest(BaseModel):
    """Request model for suspending, banning or restoring a member."""

    status: AccessStatus


class UpdateMemberRoleRequest(BaseModel):
    """Request model for changing a member's role."""

    role: GroupRole


class TransferOwnershipRequest(BaseModel):
    """Request model for handing ownership to another member."""

    membership_id: str = Field(..., description="Membership ID of the new owner")


class GroupResponse(BaseModel):
    """Response model for group."""

    id: str = Field(..., description="Group ID (ULID format)")
    name: str = Field(..., description="Group name")
    description: str = Field(..., description="Group description")
    active: bool = Field(..., description="Whether the group accepts new members")
    member_count: int = Field(..., description="Number of members")

    @classmethod
    def from_domain(cls, group: Group) -> GroupResponse:
        """Convert domain Group aggregate to API response."""
        return cls(
            id=group.id.value,
            name=group.name,
            description=group.description,
            active=group.active,
            member_count=group.member_count,
        )


class MembershipResponse(BaseModel):
    """Response model for a group membership."""

    id: str = Field(..., description="Membership ID (ULID format)")
    group_id: str
    user_id: str
    tag: str = Field(..., description="Member's login when they joined")
    name: str = Field(..., description="Member's display name when they joined")
    role: GroupRole
    status: AccessStatus
    joined_at: datetime

    @classmethod
    def from_domain(cls, membership: Membership) -> MembershipResponse:
        return cls(
            id=membership.id.value,
            group_id=membership.group_id.value,
            user_id=membership.user_id.value,
            tag=membership.tag,
            name=membership.name,
            role=membership.role,
            status=membership.status,
            joined_at=membership.joined_at,
        )
