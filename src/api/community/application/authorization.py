"""Group-scoped authorization.

Every mutating group or content operation goes through ``require_role``
before touching state. Read-only listings do not.
"""

from __future__ import annotations

from community.application.value_objects import CurrentUser
from community.domain.aggregates import Membership
from community.domain.exceptions import MembershipRestrictedError
from community.domain.value_objects import GroupId, GroupRole, UserId
from community.ports.repositories import IMembershipRepository
from shared_kernel.exceptions import (
    InsufficientRoleError,
    NotAMemberError,
    PermissionDeniedError,
)


def check_role(membership: Membership | None, min_role: GroupRole) -> Membership:
    """Validate an already loaded membership against a minimum role.

    Args:
        membership: The actor's membership in the group, or None
        min_role: The least privileged role allowed to proceed

    Returns:
        The membership, when the check passes

    Raises:
        NotAMemberError: If there is no membership
        InsufficientRoleError: If the role ranks below ``min_role``
        MembershipRestrictedError: If the member is suspended or banned
    """
    if membership is None:
        raise NotAMemberError()
    if not membership.role.at_least(min_role):
        raise InsufficientRoleError()
    if membership.is_restricted():
        raise MembershipRestrictedError(
            f"membership is {membership.status.value} in this group"
        )
    return membership


async def require_role(
    membership_repository: IMembershipRepository,
    actor_id: UserId,
    group_id: GroupId,
    min_role: GroupRole,
) -> Membership:
    """Load the actor's membership in a group and check its role.

    Has no side effects.

    Returns:
        The actor's membership

    Raises:
        NotAMemberError: If the actor is not a member of the group
        InsufficientRoleError: If the actor's role is below ``min_role``
        MembershipRestrictedError: If the actor is suspended or banned there
    """
    membership = await membership_repository.get_for_user_in_group(
        user_id=actor_id, group_id=group_id
    )
    return check_role(membership, min_role)


def require_admin(actor: CurrentUser) -> None:
    """Check that the actor holds the system-wide ADMIN level.

    Raises:
        PermissionDeniedError: If the actor is not an admin
    """
    if not actor.is_admin:
        raise PermissionDeniedError("administrator access required")
