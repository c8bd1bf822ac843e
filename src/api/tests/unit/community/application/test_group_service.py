"""Unit tests for GroupService."""

from unittest.mock import create_autospec

import pytest

from community.application.observability import GroupServiceProbe
from community.application.services import GroupService
from community.domain.aggregates import Group, Membership, User
from community.domain.exceptions import (
    GroupClosedError,
    InvalidGroupNameError,
    MembershipRestrictedError,
    OwnerCannotLeaveError,
)
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
    ValidationError,
)


@pytest.fixture
def group_repo():
    return create_autospec(IGroupRepository, instance=True)


@pytest.fixture
def membership_repo():
    return create_autospec(IMembershipRepository, instance=True)


@pytest.fixture
def post_repo():
    return create_autospec(IPostRepository, instance=True)


@pytest.fixture
def comment_repo():
    return create_autospec(ICommentRepository, instance=True)


@pytest.fixture
def user_repo():
    return create_autospec(IUserRepository, instance=True)


@pytest.fixture
def mock_probe():
    return create_autospec(GroupServiceProbe, instance=True)


@pytest.fixture
def service(
    mock_session,
    group_repo,
    membership_repo,
    post_repo,
    comment_repo,
    user_repo,
    mock_probe,
):
    return GroupService(
        session=mock_session,
        group_repository=group_repo,
        membership_repository=membership_repo,
        post_repository=post_repo,
        comment_repository=comment_repo,
        user_repository=user_repo,
        probe=mock_probe,
    )


@pytest.fixture
def group():
    return Group.create(name="Python Ladies")


def _member(group: Group, user_id: UserId, role=GroupRole.STANDARD) -> Membership:
    return Membership.create(
        group_id=group.id, user_id=user_id, tag="tag", name="Name", role=role
    )


class TestCreateGroup:
    @pytest.mark.asyncio
    async def test_saves_group_and_owner_membership(
        self, service, group_repo, membership_repo, mock_session, alice
    ):
        group = await service.create_group("Book Club", creator=alice)

        group_repo.save.assert_awaited_once_with(group)
        owner = membership_repo.save.await_args.args[0]
        assert owner.role == GroupRole.OWNER
        assert owner.status == AccessStatus.NORMAL
        assert owner.user_id == alice.user_id
        assert owner.group_id == group.id
        assert owner.tag == "alice"
        assert owner.name == "Alice"
        assert group.member_count == 1
        mock_session.begin.assert_called_once()

    @pytest.mark.asyncio
    async def test_invalid_name_persists_nothing(
        self, service, group_repo, membership_repo, mock_probe, alice
    ):
        with pytest.raises(InvalidGroupNameError):
            await service.create_group("   ", creator=alice)

        group_repo.save.assert_not_called()
        membership_repo.save.assert_not_called()
        mock_probe.group_creation_failed.assert_called_once()


class TestJoinGroup:
    @pytest.mark.asyncio
    async def test_creates_standard_membership_with_user_details(
        self, service, group_repo, user_repo, membership_repo, group
    ):
        user = User.register(login="bob", password_hash="h", name="Bob")
        group_repo.get_by_id.return_value = group
        user_repo.get_by_id.return_value = user
        membership_repo.get_for_user_in_group.return_value = None

        membership = await service.join_group(group.id, user.id)

        assert membership.role == GroupRole.STANDARD
        assert membership.tag == "bob"
        assert membership.name == "Bob"
        membership_repo.save.assert_awaited_once_with(membership)

    @pytest.mark.asyncio
    async def test_second_join_fails(
        self, service, group_repo, user_repo, membership_repo, group
    ):
        user = User.register(login="bob", password_hash="h", name="Bob")
        group_repo.get_by_id.return_value = group
        user_repo.get_by_id.return_value = user
        membership_repo.get_for_user_in_group.return_value = _member(group, user.id)

        with pytest.raises(AlreadyMemberError):
            await service.join_group(group.id, user.id)
        membership_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_group(self, service, group_repo):
        group_repo.get_by_id.return_value = None
        with pytest.raises(GroupNotFoundError):
            await service.join_group(GroupId.generate(), UserId.generate())

    @pytest.mark.asyncio
    async def test_unknown_user(self, service, group_repo, user_repo, group):
        group_repo.get_by_id.return_value = group
        user_repo.get_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            await service.join_group(group.id, UserId.generate())

    @pytest.mark.asyncio
    async def test_closed_group_rejects_joins(
        self, service, group_repo, user_repo, membership_repo, group
    ):
        group.set_active(False)
        group_repo.get_by_id.return_value = group
        user_repo.get_by_id.return_value = User.register(
            login="bob", password_hash="h", name="Bob"
        )

        with pytest.raises(GroupClosedError, match="group is closed"):
            await service.join_group(group.id, UserId.generate())
        membership_repo.save.assert_not_called()


class TestLeaveGroup:
    @pytest.mark.asyncio
    async def test_not_a_member(self, service, membership_repo, group, alice):
        membership_repo.get_for_user_in_group.return_value = None
        with pytest.raises(NotAMemberError):
            await service.leave_group(group.id, alice.user_id)

    @pytest.mark.asyncio
    async def test_owner_cannot_leave(self, service, membership_repo, group, alice):
        membership_repo.get_for_user_in_group.return_value = _member(
            group, alice.user_id, GroupRole.OWNER
        )
        with pytest.raises(OwnerCannotLeaveError):
            await service.leave_group(group.id, alice.user_id)
        membership_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_cascades_in_order(
        self, service, membership_repo, comment_repo, post_repo, group, bob
    ):
        membership = _member(group, bob.user_id)
        membership_repo.get_for_user_in_group.return_value = membership

        steps = []
        comment_repo.delete_by_author.side_effect = lambda author_id: steps.append(
            ("comments_by_author", author_id)
        )
        comment_repo.delete_on_posts_by_author.side_effect = (
            lambda author_id: steps.append(("comments_on_posts", author_id))
        )
        post_repo.delete_by_author.side_effect = lambda author_id: steps.append(
            ("posts_by_author", author_id)
        )
        membership_repo.delete.side_effect = lambda m: steps.append(("membership", m.id))

        await service.leave_group(group.id, bob.user_id)

        assert steps == [
            ("comments_by_author", membership.id),
            ("comments_on_posts", membership.id),
            ("posts_by_author", membership.id),
            ("membership", membership.id),
        ]


class TestDeleteGroup:
    @pytest.mark.asyncio
    async def test_owner_deletes_everything(
        self,
        service,
        group_repo,
        membership_repo,
        post_repo,
        comment_repo,
        group,
        alice,
    ):
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = _member(
            group, alice.user_id, GroupRole.OWNER
        )
        post_repo.delete_by_group.return_value = 3
        membership_repo.delete_by_group.return_value = 2

        await service.delete_group(group.id, alice)

        comment_repo.delete_by_group.assert_awaited_once_with(group.id)
        post_repo.delete_by_group.assert_awaited_once_with(group.id)
        membership_repo.delete_by_group.assert_awaited_once_with(group.id)
        group_repo.delete.assert_awaited_once_with(group)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [GroupRole.STANDARD, GroupRole.MODERATOR])
    async def test_non_owner_touches_nothing(
        self,
        service,
        group_repo,
        membership_repo,
        post_repo,
        comment_repo,
        mock_probe,
        group,
        bob,
        role,
    ):
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = _member(
            group, bob.user_id, role
        )

        with pytest.raises(InsufficientRoleError):
            await service.delete_group(group.id, bob)

        comment_repo.delete_by_group.assert_not_called()
        post_repo.delete_by_group.assert_not_called()
        membership_repo.delete_by_group.assert_not_called()
        group_repo.delete.assert_not_called()
        mock_probe.permission_denied.assert_called_once()

    @pytest.mark.asyncio
    async def test_non_member_is_rejected(
        self, service, group_repo, membership_repo, group, bob
    ):
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = None

        with pytest.raises(NotAMemberError):
            await service.delete_group(group.id, bob)
        group_repo.delete.assert_not_called()


class TestGroupUpdates:
    @pytest.mark.asyncio
    async def test_owner_renames(
        self, service, group_repo, membership_repo, group, alice
    ):
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = _member(
            group, alice.user_id, GroupRole.OWNER
        )

        result = await service.rename_group(group.id, "Renamed", alice)

        assert result.name == "Renamed"
        group_repo.save.assert_awaited_once_with(group)

    @pytest.mark.asyncio
    async def test_moderator_cannot_close_group(
        self, service, group_repo, membership_repo, group, bob
    ):
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = _member(
            group, bob.user_id, GroupRole.MODERATOR
        )

        with pytest.raises(InsufficientRoleError):
            await service.set_active(group.id, False, bob)
        assert group.active is True
        group_repo.save.assert_not_called()


class TestModerateMember:
    @pytest.mark.asyncio
    async def test_moderator_suspends_standard_member(
        self, service, group_repo, membership_repo, group, alice, bob
    ):
        moderator = _member(group, alice.user_id, GroupRole.MODERATOR)
        target = _member(group, bob.user_id)
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = moderator
        membership_repo.get_by_id.return_value = target

        result = await service.moderate_member(
            group.id, target.id, AccessStatus.SUSPENDED, alice
        )

        assert result.status == AccessStatus.SUSPENDED
        membership_repo.save.assert_awaited_once_with(target)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("target_role", [GroupRole.MODERATOR, GroupRole.OWNER])
    async def test_moderator_cannot_act_on_peers_or_owner(
        self, service, group_repo, membership_repo, group, alice, bob, target_role
    ):
        moderator = _member(group, alice.user_id, GroupRole.MODERATOR)
        target = _member(group, bob.user_id, target_role)
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = moderator
        membership_repo.get_by_id.return_value = target

        with pytest.raises(InsufficientRoleError):
            await service.moderate_member(
                group.id, target.id, AccessStatus.BANNED, alice
            )
        assert target.status == AccessStatus.NORMAL
        membership_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_target_from_another_group_is_not_found(
        self, service, group_repo, membership_repo, group, alice, bob
    ):
        other_group = Group.create(name="Elsewhere")
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = _member(
            group, alice.user_id, GroupRole.OWNER
        )
        membership_repo.get_by_id.return_value = _member(other_group, bob.user_id)

        with pytest.raises(MembershipNotFoundError):
            await service.moderate_member(
                group.id, MembershipId.generate(), AccessStatus.BANNED, alice
            )

    @pytest.mark.asyncio
    async def test_standard_member_cannot_moderate(
        self, service, group_repo, membership_repo, group, bob
    ):
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = _member(
            group, bob.user_id
        )

        with pytest.raises(InsufficientRoleError):
            await service.moderate_member(
                group.id, MembershipId.generate(), AccessStatus.BANNED, bob
            )
        membership_repo.get_by_id.assert_not_called()


class TestRoles:
    @pytest.mark.asyncio
    async def test_cannot_grant_owner_through_role_change(self, service, group, alice):
        with pytest.raises(ValidationError):
            await service.change_member_role(
                group.id, MembershipId.generate(), GroupRole.OWNER, alice
            )

    @pytest.mark.asyncio
    async def test_owner_promotes_member(
        self, service, group_repo, membership_repo, group, alice, bob
    ):
        target = _member(group, bob.user_id)
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = _member(
            group, alice.user_id, GroupRole.OWNER
        )
        membership_repo.get_by_id.return_value = target

        result = await service.change_member_role(
            group.id, target.id, GroupRole.MODERATOR, alice
        )
        assert result.role == GroupRole.MODERATOR

    @pytest.mark.asyncio
    async def test_transfer_ownership_swaps_roles(
        self, service, group_repo, membership_repo, group, alice, bob
    ):
        owner = _member(group, alice.user_id, GroupRole.OWNER)
        target = _member(group, bob.user_id)
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = owner
        membership_repo.get_by_id.return_value = target

        await service.transfer_ownership(group.id, target.id, alice)

        assert target.role == GroupRole.OWNER
        assert owner.role == GroupRole.MODERATOR
        assert membership_repo.save.await_count == 2

    @pytest.mark.asyncio
    async def test_transfer_to_banned_member_is_rejected(
        self, service, group_repo, membership_repo, group, alice, bob
    ):
        owner = _member(group, alice.user_id, GroupRole.OWNER)
        target = _member(group, bob.user_id)
        target.change_status(AccessStatus.BANNED)
        group_repo.get_by_id.return_value = group
        membership_repo.get_for_user_in_group.return_value = owner
        membership_repo.get_by_id.return_value = target

        with pytest.raises(MembershipRestrictedError):
            await service.transfer_ownership(group.id, target.id, alice)
        assert owner.role == GroupRole.OWNER


class TestSearchGroups:
    @pytest.mark.asyncio
    async def test_excludes_own_groups_and_orders_by_size_then_id(
        self, service, group_repo, membership_repo, alice
    ):
        mine = Group.create(name="Mine")
        small = Group.create(name="Small")
        big = Group.create(name="Big")
        tie_a = Group.create(name="Tie A")
        tie_b = Group.create(name="Tie B")
        mine.member_count = 100
        small.member_count = 1
        big.member_count = 10
        tie_a.member_count = 5
        tie_b.member_count = 5
        group_repo.search.return_value = [small, tie_b, mine, big, tie_a]
        membership_repo.list_by_user.return_value = [_member(mine, alice.user_id)]

        result = await service.search_groups("", alice)

        ties = sorted([tie_a, tie_b], key=lambda g: g.id.value)
        assert result == [big, *ties, small]
        group_repo.search.assert_awaited_once_with("")
