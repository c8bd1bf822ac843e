"""Group application service for the community bounded context.

Orchestrates the group lifecycle: creation with an owner, joining and
leaving, moderation and deletion with cascades.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from community.application.authorization import check_role, require_role
from community.application.observability import (
    DefaultGroupServiceProbe,
    GroupServiceProbe,
)
from community.application.value_objects import CurrentUser
from community.domain.aggregates import Group, Membership
from community.domain.exceptions import GroupClosedError, OwnerCannotLeaveError
from community.domain.value_objects import (
    AccessStatus,
    GroupId,
    GroupRole,
    MembershipId,
    UserId,
)
from community.ports.exceptions import (
    AlreadyMemberError,
    GroupNotFoundError,
    MembershipNotFoundError,
    UserNotFoundError,
)
from community.ports.repositories import (
    ICommentRepository,
    IGroupRepository,
    IMembershipRepository,
    IPostRepository,
    IUserRepository,
)
from shared_kernel.exceptions import (
    InsufficientRoleError,
    NotAMemberError,
    PermissionDeniedError,
    ValidationError,
)


class GroupService:
    """Application service for group management.

    Every mutating operation checks the actor's role through the
    authorization helpers before touching state, and runs in a single
    transaction.
    """

    def __init__(
        self,
        session: AsyncSession,
        group_repository: IGroupRepository,
        membership_repository: IMembershipRepository,
        post_repository: IPostRepository,
        comment_repository: ICommentRepository,
        user_repository: IUserRepository,
        probe: GroupServiceProbe | None = None,
    ):
        """Initialize GroupService with dependencies.

        Args:
            session: Database session for transaction management
            group_repository: Repository for group persistence
            membership_repository: Repository for memberships
            post_repository: Repository for posts (cascades)
            comment_repository: Repository for comments (cascades)
            user_repository: Repository for user lookups on join
            probe: Optional domain probe for observability
        """
        self._session = session
        self._group_repository = group_repository
        self._membership_repository = membership_repository
        self._post_repository = post_repository
        self._comment_repository = comment_repository
        self._user_repository = user_repository
        self._probe = probe or DefaultGroupServiceProbe()

    async def _get_group(self, group_id: GroupId) -> Group:
        group = await self._group_repository.get_by_id(group_id)
        if group is None:
            raise GroupNotFoundError(f"Group {group_id} not found")
        return group

    async def _get_member_of(
        self, group_id: GroupId, membership_id: MembershipId
    ) -> Membership:
        membership = await self._membership_repository.get_by_id(membership_id)
        if membership is None or membership.group_id != group_id:
            raise MembershipNotFoundError(
                f"Membership {membership_id} not found in group {group_id}"
            )
        return membership

    async def _require_role(
        self,
        actor_id: UserId,
        group_id: GroupId,
        min_role: GroupRole,
        operation: str,
    ) -> Membership:
        try:
            return await require_role(
                self._membership_repository, actor_id, group_id, min_role
            )
        except PermissionDeniedError as e:
            self._probe.permission_denied(
                group_id=group_id.value,
                user_id=actor_id.value,
                operation=operation,
                reason=str(e),
            )
            raise

    async def _delete_membership_cascade(self, membership: Membership) -> None:
        """Remove a membership together with its content.

        Order: comments it wrote, comments on its posts, its posts, itself.
        """
        await self._comment_repository.delete_by_author(membership.id)
        await self._comment_repository.delete_on_posts_by_author(membership.id)
        await self._post_repository.delete_by_author(membership.id)
        await self._membership_repository.delete(membership)

    async def create_group(
        self,
        name: str,
        creator: CurrentUser,
        description: str | None = None,
    ) -> Group:
        """Create a new, open group with the creator as OWNER.

        The group and the owner membership are saved in one transaction.

        Args:
            name: Group name (1-255 characters after trimming)
            creator: The acting user, who becomes OWNER
            description: Optional description

        Returns:
            The created Group aggregate

        Raises:
            InvalidGroupNameError: If the name is blank or too long
        """
        try:
            group = Group.create(name=name, description=description)
            owner = Membership.create(
                group_id=group.id,
                user_id=creator.user_id,
                tag=creator.login,
                name=creator.name,
                role=GroupRole.OWNER,
            )

            async with self._session.begin():
                await self._group_repository.save(group)
                await self._membership_repository.save(owner)

            group.member_count = 1
            self._probe.group_created(
                group_id=group.id.value,
                name=group.name,
                creator_id=creator.user_id.value,
            )
            return group

        except Exception as e:
            self._probe.group_creation_failed(name=name, error=str(e))
            raise

    async def get_group(self, group_id: GroupId) -> Group:
        """Load a group.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        async with self._session.begin():
            return await self._get_group(group_id)

    async def list_members(self, group_id: GroupId) -> list[Membership]:
        """List the memberships of a group, oldest first.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        async with self._session.begin():
            await self._get_group(group_id)
            return await self._membership_repository.list_by_group(group_id)

    async def list_groups_for_user(self, user_id: UserId) -> list[Group]:
        """List every group the user is a member of."""
        async with self._session.begin():
            return await self._group_repository.list_for_user(user_id)

    async def search_groups(self, query: str, requester: CurrentUser) -> list[Group]:
        """Find groups the requester could join.

        Matches name or description case-insensitively; an empty query
        matches everything. Groups the requester already belongs to are
        excluded. Results are ordered by member count (descending), then by
        group id (ascending).
        """
        async with self._session.begin():
            matches = await self._group_repository.search((query or "").strip())
            mine = await self._membership_repository.list_by_user(requester.user_id)

        joined = {m.group_id for m in mine}
        candidates = [g for g in matches if g.id not in joined]
        return sorted(candidates, key=lambda g: (-g.member_count, g.id.value))

    async def join_group(self, group_id: GroupId, user_id: UserId) -> Membership:
        """Add a user to a group as a STANDARD member.

        Raises:
            GroupNotFoundError: If the group does not exist
            UserNotFoundError: If the user does not exist
            GroupClosedError: If the group is not accepting members
            AlreadyMemberError: If the user is already a member
        """
        async with self._session.begin():
            group = await self._get_group(group_id)
            user = await self._user_repository.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(f"User {user_id} not found")
            if not group.active:
                raise GroupClosedError("group is closed")

            existing = await self._membership_repository.get_for_user_in_group(
                user_id=user_id, group_id=group_id
            )
            if existing is not None:
                raise AlreadyMemberError(
                    f"User {user_id} is already a member of group {group_id}"
                )

            membership = Membership.create(
                group_id=group_id,
                user_id=user_id,
                tag=user.login,
                name=user.name,
            )
            await self._membership_repository.save(membership)

        self._probe.member_joined(
            group_id=group_id.value,
            user_id=user_id.value,
            membership_id=membership.id.value,
        )
        return membership

    async def leave_group(self, group_id: GroupId, user_id: UserId) -> None:
        """Remove the user's own membership and everything it authored.

        Other groups are unaffected.

        Raises:
            NotAMemberError: If the user is not a member of the group
            OwnerCannotLeaveError: If the user owns the group
        """
        async with self._session.begin():
            membership = await self._membership_repository.get_for_user_in_group(
                user_id=user_id, group_id=group_id
            )
            if membership is None:
                raise NotAMemberError()
            if membership.is_owner():
                raise OwnerCannotLeaveError()
            await self._delete_membership_cascade(membership)

        self._probe.member_left(group_id=group_id.value, user_id=user_id.value)

    async def rename_group(
        self, group_id: GroupId, name: str, actor: CurrentUser
    ) -> Group:
        """Rename a group (OWNER only)."""
        async with self._session.begin():
            group = await self._get_group(group_id)
            await self._require_role(actor.user_id, group_id, GroupRole.OWNER, "rename")
            group.rename(name)
            await self._group_repository.save(group)

        self._probe.group_updated(
            group_id=group_id.value, actor_id=actor.user_id.value, field="name"
        )
        return group

    async def change_description(
        self, group_id: GroupId, description: str | None, actor: CurrentUser
    ) -> Group:
        """Replace a group's description (OWNER only)."""
        async with self._session.begin():
            group = await self._get_group(group_id)
            await self._require_role(
                actor.user_id, group_id, GroupRole.OWNER, "change_description"
            )
            group.change_description(description)
            await self._group_repository.save(group)

        self._probe.group_updated(
            group_id=group_id.value, actor_id=actor.user_id.value, field="description"
        )
        return group

    async def set_active(
        self, group_id: GroupId, is_open: bool, actor: CurrentUser
    ) -> Group:
        """Open or close a group to new members (OWNER only)."""
        async with self._session.begin():
            group = await self._get_group(group_id)
            await self._require_role(
                actor.user_id, group_id, GroupRole.OWNER, "set_active"
            )
            group.set_active(is_open)
            await self._group_repository.save(group)

        self._probe.group_updated(
            group_id=group_id.value, actor_id=actor.user_id.value, field="active"
        )
        return group

    async def delete_group(self, group_id: GroupId, actor: CurrentUser) -> None:
        """Delete a group with all of its posts, comments and memberships.

        Nothing is touched unless the actor is the OWNER.

        Raises:
            GroupNotFoundError: If the group does not exist
            NotAMemberError: If the actor is not a member
            InsufficientRoleError: If the actor is not the OWNER
        """
        async with self._session.begin():
            group = await self._get_group(group_id)
            await self._require_role(actor.user_id, group_id, GroupRole.OWNER, "delete")

            await self._comment_repository.delete_by_group(group_id)
            posts = await self._post_repository.delete_by_group(group_id)
            memberships = await self._membership_repository.delete_by_group(group_id)
            await self._group_repository.delete(group)

        self._probe.group_deleted(
            group_id=group_id.value,
            actor_id=actor.user_id.value,
            posts=posts,
            memberships=memberships,
        )

    async def moderate_member(
        self,
        group_id: GroupId,
        membership_id: MembershipId,
        new_status: AccessStatus,
        actor: CurrentUser,
    ) -> Membership:
        """Suspend, ban or restore a member (MODERATOR or above).

        The target must rank strictly below the actor, so moderators cannot
        act on owners or on other moderators.

        Raises:
            GroupNotFoundError: If the group does not exist
            NotAMemberError: If the actor is not a member
            InsufficientRoleError: If the actor is below MODERATOR or does
                not outrank the target
            MembershipNotFoundError: If the target is not in this group
        """
        async with self._session.begin():
            await self._get_group(group_id)
            actor_membership = await self._require_role(
                actor.user_id, group_id, GroupRole.MODERATOR, "moderate"
            )
            target = await self._get_member_of(group_id, membership_id)
            self._require_outranks(actor_membership, target, "moderate")

            target.change_status(new_status)
            await self._membership_repository.save(target)

        self._probe.member_status_changed(
            group_id=group_id.value,
            membership_id=membership_id.value,
            status=new_status.value,
            actor_id=actor.user_id.value,
        )
        return target

    async def remove_member(
        self, group_id: GroupId, membership_id: MembershipId, actor: CurrentUser
    ) -> None:
        """Remove a member and their content (MODERATOR or above).

        Uses the same ranking rule as moderate_member and the same cascade as
        leave_group.
        """
        async with self._session.begin():
            await self._get_group(group_id)
            actor_membership = await self._require_role(
                actor.user_id, group_id, GroupRole.MODERATOR, "remove_member"
            )
            target = await self._get_member_of(group_id, membership_id)
            self._require_outranks(actor_membership, target, "remove_member")
            await self._delete_membership_cascade(target)

        self._probe.member_removed(
            group_id=group_id.value,
            membership_id=membership_id.value,
            actor_id=actor.user_id.value,
        )

    async def change_member_role(
        self,
        group_id: GroupId,
        membership_id: MembershipId,
        new_role: GroupRole,
        actor: CurrentUser,
    ) -> Membership:
        """Promote or demote a member between STANDARD and MODERATOR (OWNER only).

        Raises:
            ValidationError: If ``new_role`` is OWNER (use transfer_ownership)
                or the target is the owner
        """
        if new_role == GroupRole.OWNER:
            raise ValidationError("use ownership transfer to grant the OWNER role")

        async with self._session.begin():
            await self._get_group(group_id)
            await self._require_role(
                actor.user_id, group_id, GroupRole.OWNER, "change_role"
            )
            target = await self._get_member_of(group_id, membership_id)
            if target.is_owner():
                raise ValidationError("the owner's role cannot be changed")

            target.change_role(new_role)
            await self._membership_repository.save(target)

        self._probe.member_role_changed(
            group_id=group_id.value,
            membership_id=membership_id.value,
            role=new_role.value,
            actor_id=actor.user_id.value,
        )
        return target

    async def transfer_ownership(
        self, group_id: GroupId, membership_id: MembershipId, actor: CurrentUser
    ) -> Membership:
        """Hand the OWNER role to another member; the actor becomes MODERATOR.

        Raises:
            ValidationError: If the target is the actor's own membership
            MembershipRestrictedError: If the target is suspended or banned
        """
        async with self._session.begin():
            await self._get_group(group_id)
            current_owner = await self._require_role(
                actor.user_id, group_id, GroupRole.OWNER, "transfer_ownership"
            )
            target = await self._get_member_of(group_id, membership_id)
            if target.id == current_owner.id:
                raise ValidationError("the group is already owned by this member")
            check_role(target, GroupRole.STANDARD)

            target.change_role(GroupRole.OWNER)
            current_owner.change_role(GroupRole.MODERATOR)
            await self._membership_repository.save(current_owner)
            await self._membership_repository.save(target)

        self._probe.ownership_transferred(
            group_id=group_id.value,
            previous_owner_id=current_owner.id.value,
            new_owner_id=target.id.value,
        )
        return target

    def _require_outranks(
        self, actor: Membership, target: Membership, operation: str
    ) -> None:
        if not actor.role.outranks(target.role):
            self._probe.permission_denied(
                group_id=actor.group_id.value,
                user_id=actor.user_id.value,
                operation=operation,
                reason=f"target role {target.role.value} is not below {actor.role.value}",
            )
            raise InsufficientRoleError()
