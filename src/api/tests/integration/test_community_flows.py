"""Integration tests for the community services against a real database.

Each test drives the services the way a request would, sharing one session,
and checks what actually ended up in (or stayed out of) the tables.
"""

from dataclasses import replace

import pytest

from community.domain.aggregates import Membership
from community.domain.exceptions import OwnerCannotLeaveError, SelfReportError
from community.domain.value_objects import AuthorizationLevel, GroupRole
from community.infrastructure import MembershipRepository
from community.ports.exceptions import AlreadyMemberError, DuplicateLoginError
from shared_kernel.exceptions import InsufficientRoleError, PermissionDeniedError

pytestmark = pytest.mark.integration


class TestRegistration:
    @pytest.mark.asyncio
    async def test_duplicate_login_is_rejected_case_insensitively(
        self, services, register
    ):
        await register("ada")

        with pytest.raises(DuplicateLoginError):
            await services.users.register(login="ADA", password="pw", name="Ada 2")

        user = await services.users.get_by_login("ada")
        assert user.name == "Ada"

    @pytest.mark.asyncio
    async def test_registered_user_can_authenticate(self, services, register):
        ada = await register("ada")

        token = await services.users.authenticate("ada", "s3cret-pass")

        assert token.user.id == ada.user_id
        profile = await services.users.get_profile(ada.user_id)
        assert profile.name == "Ada"


class TestGroupMembership:
    @pytest.mark.asyncio
    async def test_creator_is_the_single_owner(self, services, register):
        alice = await register("alice")

        group = await services.groups.create_group(name="Writers", creator=alice)
        members = await services.groups.list_members(group.id)

        assert [m.user_id for m in members] == [alice.user_id]
        assert members[0].role == GroupRole.OWNER
        assert (await services.groups.get_group(group.id)).member_count == 1

    @pytest.mark.asyncio
    async def test_double_join_is_rejected(self, services, register):
        alice = await register("alice")
        bob = await register("bob")
        group = await services.groups.create_group(name="Writers", creator=alice)

        await services.groups.join_group(group.id, bob.user_id)
        with pytest.raises(AlreadyMemberError):
            await services.groups.join_group(group.id, bob.user_id)

        assert (await services.groups.get_group(group.id)).member_count == 2

    @pytest.mark.asyncio
    async def test_unique_constraint_backs_the_join_check(
        self, services, register, session_factory
    ):
        alice = await register("alice")
        group = await services.groups.create_group(name="Writers", creator=alice)
        duplicate = Membership.create(
            group_id=group.id,
            user_id=alice.user_id,
            tag=alice.login,
            name=alice.name,
        )

        async with session_factory() as session:
            with pytest.raises(AlreadyMemberError):
                async with session.begin():
                    await MembershipRepository(session=session).save(duplicate)

    @pytest.mark.asyncio
    async def test_owner_cannot_leave(self, services, register):
        alice = await register("alice")
        group = await services.groups.create_group(name="Writers", creator=alice)

        with pytest.raises(OwnerCannotLeaveError):
            await services.groups.leave_group(group.id, alice.user_id)

        assert len(await services.groups.list_members(group.id)) == 1

    @pytest.mark.asyncio
    async def test_leaving_removes_the_members_content_only(self, services, register):
        alice = await register("alice")
        bob = await register("bob")
        group = await services.groups.create_group(name="Writers", creator=alice)
        await services.groups.join_group(group.id, bob.user_id)

        alice_post = await services.content.create_post(group.id, "hello", alice)
        bob_post = await services.content.create_post(group.id, "hi all", bob)
        await services.content.create_comment(bob_post.id, "welcome", alice)
        await services.content.create_comment(alice_post.id, "thanks", bob)
        kept = await services.content.create_comment(alice_post.id, "me too", alice)

        await services.groups.leave_group(group.id, bob.user_id)

        posts = await services.content.list_posts_by_group(group.id)
        assert [p.id for p in posts] == [alice_post.id]
        comments = await services.content.list_comments_by_post(alice_post.id)
        assert [c.id for c in comments] == [kept.id]
        assert [m.user_id for m in await services.groups.list_members(group.id)] == [
            alice.user_id
        ]


class TestContent:
    @pytest.mark.asyncio
    async def test_posts_round_trip(self, services, register):
        alice = await register("alice")
        group = await services.groups.create_group(name="Writers", creator=alice)

        post = await services.content.create_post(group.id, "  first post  ", alice)
        posts = await services.content.list_posts_by_group(group.id)

        assert len(posts) == 1
        assert posts[0].id == post.id
        assert posts[0].content == "first post"
        authors = await services.content.authors_of([posts[0].author_id])
        assert authors[posts[0].author_id].user_id == alice.user_id

    @pytest.mark.asyncio
    async def test_author_deletes_post_with_its_comments(self, services, register):
        alice = await register("alice")
        bob = await register("bob")
        group = await services.groups.create_group(name="Writers", creator=alice)
        await services.groups.join_group(group.id, bob.user_id)
        post = await services.content.create_post(group.id, "mine", bob)
        await services.content.create_comment(post.id, "nice", alice)

        await services.content.delete_post(post.id, bob)

        assert await services.content.list_posts_by_group(group.id) == []

    @pytest.mark.asyncio
    async def test_owner_deletes_someone_elses_post(self, services, register):
        alice = await register("alice")
        bob = await register("bob")
        group = await services.groups.create_group(name="Writers", creator=alice)
        await services.groups.join_group(group.id, bob.user_id)
        post = await services.content.create_post(group.id, "spam", bob)

        await services.content.delete_post(post.id, alice)

        assert await services.content.list_posts_by_group(group.id) == []

    @pytest.mark.asyncio
    async def test_only_author_or_owner_deletes_a_post(self, services, register):
        owner = await register("alice")
        member = await register("bob")
        group = await services.groups.create_group(name="Writers", creator=owner)
        post = await services.content.create_post(group.id, "intro", owner)
        await services.groups.join_group(group.id, member.user_id)

        with pytest.raises(PermissionDeniedError):
            await services.content.delete_post(post.id, member)
        assert [p.id for p in await services.content.list_posts_by_group(group.id)] == [
            post.id
        ]

        await services.content.delete_post(post.id, owner)

        assert await services.content.list_posts_by_group(group.id) == []

    @pytest.mark.asyncio
    async def test_standard_member_cannot_delete_the_group(self, services, register):
        alice = await register("alice")
        bob = await register("bob")
        group = await services.groups.create_group(name="Writers", creator=alice)
        await services.groups.join_group(group.id, bob.user_id)
        post = await services.content.create_post(group.id, "stays", alice)
        comment = await services.content.create_comment(post.id, "also stays", bob)

        with pytest.raises(InsufficientRoleError):
            await services.groups.delete_group(group.id, bob)

        assert (await services.groups.get_group(group.id)).member_count == 2
        assert [p.id for p in await services.content.list_posts_by_group(group.id)] == [
            post.id
        ]
        comments = await services.content.list_comments_by_post(post.id)
        assert [c.id for c in comments] == [comment.id]

    @pytest.mark.asyncio
    async def test_owner_deletes_the_group(self, services, register):
        alice = await register("alice")
        group = await services.groups.create_group(name="Writers", creator=alice)
        await services.content.create_post(group.id, "bye", alice)

        await services.groups.delete_group(group.id, alice)

        assert await services.groups.list_groups_for_user(alice.user_id) == []


class TestReports:
    @pytest.mark.asyncio
    async def test_self_report_is_not_persisted(self, services, register):
        alice = await register("alice")
        admin = replace(
            await register("root"), authorization=AuthorizationLevel.ADMIN
        )

        with pytest.raises(SelfReportError):
            await services.reports.file_report(
                category="spam",
                description="myself",
                reported_login="alice",
                author=alice,
            )

        assert await services.reports.list_reports(admin) == []

    @pytest.mark.asyncio
    async def test_filed_report_is_listed_for_admins(self, services, register):
        alice = await register("alice")
        await register("troll")
        admin = replace(
            await register("root"), authorization=AuthorizationLevel.ADMIN
        )

        report = await services.reports.file_report(
            category="abuse",
            description="rude replies",
            reported_login="TROLL",
            author=alice,
        )

        listed = await services.reports.list_by_author(alice.user_id, admin)
        assert [r.id for r in listed] == [report.id]
