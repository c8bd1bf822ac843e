"""HTTP routes for groups and their members."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from community.application.services import GroupService
from community.application.value_objects import CurrentUser
from community.dependencies.authentication import get_current_user
from community.dependencies.services import get_group_service
from community.domain.value_objects import GroupId, MembershipId
from community.presentation.groups.models import (
    CreateGroupRequest,
    GroupResponse,
    MembershipResponse,
    TransferOwnershipRequest,
    UpdateGroupRequest,
    UpdateMemberRoleRequest,
    UpdateMemberStatusRequest,
)
from shared_kernel.exceptions import DomainError
from shared_kernel.http_errors import parse_identifier, to_http_exception

router = APIRouter(
    prefix="/groups",
    tags=["groups"],
)


@router.get(
    "",
    summary="List my groups",
    responses={
        200: {"description": "Groups listed successfully"},
        401: {"description": "Authentication required"},
        500: {"description": "Internal server error"},
    },
)
async def list_my_groups(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> list[GroupResponse]:
    """List the groups the authenticated user belongs to."""
    try:
        groups = await service.list_groups_for_user(current_user.user_id)
        return [GroupResponse.from_domain(group) for group in groups]

    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list groups",
        )


@router.get(
    "/search",
    summary="Search groups",
    description="Groups the user could join, most members first",
)
async def search_groups(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
    q: Annotated[str, Query(description="Text to look for")] = "",
) -> list[GroupResponse]:
    """Search groups by name or description."""
    try:
        groups = await service.search_groups(query=q, requester=current_user)
        return [GroupResponse.from_domain(group) for group in groups]

    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search groups",
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Group created"},
        400: {"description": "Invalid group name"},
        500: {"description": "Internal server error"},
    },
)
async def create_group(
    request: CreateGroupRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> GroupResponse:
    """Create a new group with the authenticated user as owner."""
    try:
        group = await service.create_group(
            name=request.name,
            description=request.description,
            creator=current_user,
        )
        return GroupResponse.from_domain(group)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create group",
        )


@router.get("/{group_id}")
async def get_group(
    group_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> GroupResponse:
    """Get group by ID."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")

    try:
        group = await service.get_group(group_id_obj)
        return GroupResponse.from_domain(group)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve group",
        )


@router.patch(
    "/{group_id}",
    summary="Update group",
    description="Rename, describe, open or close a group. Requires OWNER.",
    responses={
        200: {"description": "Group updated successfully"},
        400: {"description": "Invalid group ID or name"},
        403: {"description": "Not the owner of the group"},
        404: {"description": "Group not found"},
        500: {"description": "Internal server error"},
    },
)
async def update_group(
    group_id: str,
    request: UpdateGroupRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> GroupResponse:
    """Apply each present field through its own owner-gated operation."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")

    try:
        group = None
        if request.name is not None:
            group = await service.rename_group(group_id_obj, request.name, current_user)
        if request.description is not None:
            group = await service.change_description(
                group_id_obj, request.description, current_user
            )
        if request.active is not None:
            group = await service.set_active(group_id_obj, request.active, current_user)
        if group is None:
            group = await service.get_group(group_id_obj)
        return GroupResponse.from_domain(group)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update group",
        )


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_group(
    group_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> None:
    """Delete a group with all of its content. Requires OWNER.

    Raises:
        HTTPException: 400 if group ID is invalid
        HTTPException: 403 if the user is not the owner
        HTTPException: 404 if group not found
        HTTPException: 500 for unexpected errors
    """
    group_id_obj = parse_identifier(GroupId, group_id, "group")

    try:
        await service.delete_group(group_id_obj, current_user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete group",
        )


@router.post("/{group_id}/join", status_code=status.HTTP_201_CREATED)
async def join_group(
    group_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> MembershipResponse:
    """Join a group as a STANDARD member."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")

    try:
        membership = await service.join_group(group_id_obj, current_user.user_id)
        return MembershipResponse.from_domain(membership)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to join group",
        )


@router.post("/{group_id}/leave", status_code=status.HTTP_204_NO_CONTENT)
async def leave_group(
    group_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> None:
    """Leave a group, removing everything posted there."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")

    try:
        await service.leave_group(group_id_obj, current_user.user_id)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to leave group",
        )


@router.get("/{group_id}/members")
async def list_members(
    group_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> list[MembershipResponse]:
    """List the members of a group."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")

    try:
        members = await service.list_members(group_id_obj)
        return [MembershipResponse.from_domain(m) for m in members]

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list members",
        )


@router.patch("/{group_id}/members/{membership_id}/status")
async def update_member_status(
    group_id: str,
    membership_id: str,
    request: UpdateMemberStatusRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> MembershipResponse:
    """Suspend, ban or restore a member. Requires MODERATOR or above."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")
    membership_id_obj = parse_identifier(MembershipId, membership_id, "membership")

    try:
        membership = await service.moderate_member(
            group_id=group_id_obj,
            membership_id=membership_id_obj,
            new_status=request.status,
            actor=current_user,
        )
        return MembershipResponse.from_domain(membership)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update member status",
        )


@router.patch("/{group_id}/members/{membership_id}/role")
async def update_member_role(
    group_id: str,
    membership_id: str,
    request: UpdateMemberRoleRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> MembershipResponse:
    """Promote or demote a member. Requires OWNER."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")
    membership_id_obj = parse_identifier(MembershipId, membership_id, "membership")

    try:
        membership = await service.change_member_role(
            group_id=group_id_obj,
            membership_id=membership_id_obj,
            new_role=request.role,
            actor=current_user,
        )
        return MembershipResponse.from_domain(membership)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update member role",
        )


@router.delete(
    "/{group_id}/members/{membership_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_member(
    group_id: str,
    membership_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> None:
    """Remove a member and their content. Requires MODERATOR or above."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")
    membership_id_obj = parse_identifier(MembershipId, membership_id, "membership")

    try:
        await service.remove_member(group_id_obj, membership_id_obj, current_user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to remove member",
        )


@router.post("/{group_id}/transfer")
async def transfer_ownership(
    group_id: str,
    request: TransferOwnershipRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[GroupService, Depends(get_group_service)],
) -> MembershipResponse:
    """Hand ownership to another member. Requires OWNER."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")
    membership_id_obj = parse_identifier(
        MembershipId, request.membership_id, "membership"
    )

    try:
        membership = await service.transfer_ownership(
            group_id_obj, membership_id_obj, current_user
        )
        return MembershipResponse.from_domain(membership)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to transfer ownership",
        )
