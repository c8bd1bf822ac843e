"""Repository protocols (ports) for the community bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Implementations never commit; the calling service owns the
transaction.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from community.domain.aggregates import (
    Comment,
    Group,
    Membership,
    Notification,
    Post,
    Profile,
    Report,
    User,
)
from community.domain.value_objects import (
    CommentId,
    GroupId,
    MembershipId,
    NotificationId,
    PostId,
    ReportId,
    ReportStatus,
    UserId,
)


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence."""

    async def save(self, user: User) -> None:
        """Persist a user aggregate.

        Creates a new user or updates an existing one.

        Raises:
            DuplicateLoginError: If the login is already taken
        """
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID, or None if not found."""
        ...

    async def get_by_login(self, login: str) -> User | None:
        """Retrieve a user by normalized login, or None if not found."""
        ...

    async def list_reported(self) -> list[User]:
        """List every user that has received at least one report."""
        ...


@runtime_checkable
class IProfileRepository(Protocol):
    """Repository for the 1:1 user profile."""

    async def save(self, profile: Profile) -> None:
        """Persist a profile (create or update)."""
        ...

    async def get_by_user_id(self, user_id: UserId) -> Profile | None:
        """Retrieve the profile of a user, or None if not found."""
        ...


@runtime_checkable
class IGroupRepository(Protocol):
    """Repository for Group aggregate persistence.

    Returned groups carry ``member_count`` as of the query.
    """

    async def save(self, group: Group) -> None:
        """Persist a group aggregate (create or update)."""
        ...

    async def get_by_id(self, group_id: GroupId) -> Group | None:
        """Retrieve a group by its ID, or None if not found."""
        ...

    async def list_for_user(self, user_id: UserId) -> list[Group]:
        """List the groups in which the user holds a membership."""
        ...

    async def search(self, query: str) -> list[Group]:
        """Find groups whose name or description contains ``query``.

        Matching is case-insensitive. An empty query matches every group.
        No ordering is guaranteed.
        """
        ...

    async def delete(self, group: Group) -> bool:
        """Delete the group row.

        Memberships, posts and comments must already be removed.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class IMembershipRepository(Protocol):
    """Repository for Membership persistence."""

    async def save(self, membership: Membership) -> None:
        """Persist a membership (create or update).

        Raises:
            AlreadyMemberError: If the (user, group) pair already exists
        """
        ...

    async def get_by_id(self, membership_id: MembershipId) -> Membership | None:
        """Retrieve a membership by its ID, or None if not found."""
        ...

    async def get_for_user_in_group(
        self, user_id: UserId, group_id: GroupId
    ) -> Membership | None:
        """Retrieve the unique membership of a user in a group, if any."""
        ...

    async def get_many(self, membership_ids: list[MembershipId]) -> list[Membership]:
        """Retrieve the memberships with the given IDs (missing IDs skipped)."""
        ...

    async def list_by_group(self, group_id: GroupId) -> list[Membership]:
        """List the memberships of a group, oldest first."""
        ...

    async def list_by_user(self, user_id: UserId) -> list[Membership]:
        """List every membership held by a user."""
        ...

    async def delete(self, membership: Membership) -> bool:
        """Delete a single membership.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def delete_by_group(self, group_id: GroupId) -> int:
        """Delete every membership of a group. Returns the number removed."""
        ...


@runtime_checkable
class IPostRepository(Protocol):
    """Repository for Post persistence."""

    async def save(self, post: Post) -> None:
        """Persist a post (create or update)."""
        ...

    async def get_by_id(self, post_id: PostId) -> Post | None:
        """Retrieve a post by its ID, or None if not found."""
        ...

    async def list_by_group(self, group_id: GroupId) -> list[Post]:
        """List the posts of a group, newest first."""
        ...

    async def list_latest_in_groups(
        self, group_ids: list[GroupId], limit: int
    ) -> list[Post]:
        """List the newest ``limit`` posts across the given groups, newest first."""
        ...

    async def delete(self, post: Post) -> bool:
        """Delete a single post. Its comments must already be removed."""
        ...

    async def delete_by_author(self, author_id: MembershipId) -> int:
        """Delete every post authored by a membership. Returns the number removed."""
        ...

    async def delete_by_group(self, group_id: GroupId) -> int:
        """Delete every post of a group. Returns the number removed."""
        ...


@runtime_checkable
class ICommentRepository(Protocol):
    """Repository for Comment persistence."""

    async def save(self, comment: Comment) -> None:
        """Persist a comment (create or update)."""
        ...

    async def get_by_id(self, comment_id: CommentId) -> Comment | None:
        """Retrieve a comment by its ID, or None if not found."""
        ...

    async def list_by_post(self, post_id: PostId) -> list[Comment]:
        """List the comments of a post, oldest first."""
        ...

    async def delete(self, comment: Comment) -> bool:
        """Delete a single comment."""
        ...

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post. Returns the number removed."""
        ...

    async def delete_by_author(self, author_id: MembershipId) -> int:
        """Delete every comment authored by a membership."""
        ...

    async def delete_on_posts_by_author(self, author_id: MembershipId) -> int:
        """Delete every comment on posts authored by a membership."""
        ...

    async def delete_by_group(self, group_id: GroupId) -> int:
        """Delete every comment on every post of a group."""
        ...


@runtime_checkable
class IReportRepository(Protocol):
    """Repository for Report persistence."""

    async def save(self, report: Report) -> None:
        """Persist a report (create or update)."""
        ...

    async def get_by_id(self, report_id: ReportId) -> Report | None:
        """Retrieve a report by its ID, or None if not found."""
        ...

    async def search(
        self,
        status: ReportStatus | None = None,
        category: str | None = None,
    ) -> list[Report]:
        """List reports, newest first, optionally filtered by status and category."""
        ...

    async def list_by_author(self, author_id: UserId) -> list[Report]:
        """List the reports filed by a user, newest first."""
        ...

    async def list_by_reported(self, reported_id: UserId) -> list[Report]:
        """List the reports filed against a user, newest first."""
        ...

    async def list_between(self, start: datetime, end: datetime) -> list[Report]:
        """List reports filed within [start, end], newest first."""
        ...


@runtime_checkable
class INotificationRepository(Protocol):
    """Repository for Notification persistence."""

    async def save(self, notification: Notification) -> None:
        """Persist a notification (create or update)."""
        ...

    async def get_by_id(self, notification_id: NotificationId) -> Notification | None:
        """Retrieve a notification by its ID, or None if not found."""
        ...

    async def list_for_recipient(self, recipient_id: UserId) -> list[Notification]:
        """List the notifications received by a user, newest first."""
        ...

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count the unread notifications of a user."""
        ...
