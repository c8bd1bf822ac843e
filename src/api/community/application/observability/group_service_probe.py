"""Protocol for group application service observability.

Defines the interface for domain probes that capture application-level
domain events for the group lifecycle and member management.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class GroupServiceProbe(Protocol):
    """Domain probe for group application service operations."""

    def group_created(self, group_id: str, name: str, creator_id: str) -> None:
        """Record that a group was created."""
        ...

    def group_creation_failed(self, name: str, error: str) -> None:
        """Record that group creation failed."""
        ...

    def group_updated(self, group_id: str, actor_id: str, field: str) -> None:
        """Record that one field of a group changed."""
        ...

    def group_deleted(
        self, group_id: str, actor_id: str, posts: int, memberships: int
    ) -> None:
        """Record that a group and everything in it was deleted."""
        ...

    def member_joined(self, group_id: str, user_id: str, membership_id: str) -> None:
        """Record that a user joined a group."""
        ...

    def member_left(self, group_id: str, user_id: str) -> None:
        """Record that a member left a group."""
        ...

    def member_removed(self, group_id: str, membership_id: str, actor_id: str) -> None:
        """Record that a moderator removed a member."""
        ...

    def member_status_changed(
        self, group_id: str, membership_id: str, status: str, actor_id: str
    ) -> None:
        """Record that a member was suspended, banned or restored."""
        ...

    def member_role_changed(
        self, group_id: str, membership_id: str, role: str, actor_id: str
    ) -> None:
        """Record that a member's role changed."""
        ...

    def ownership_transferred(
        self, group_id: str, previous_owner_id: str, new_owner_id: str
    ) -> None:
        """Record that group ownership moved to another member."""
        ...

    def permission_denied(
        self, group_id: str, user_id: str, operation: str, reason: str
    ) -> None:
        """Record that a group operation was refused."""
        ...


class DefaultGroupServiceProbe:
    """Default implementation of GroupServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def group_created(self, group_id: str, name: str, creator_id: str) -> None:
        self._logger.info(
            "group_created", group_id=group_id, name=name, creator_id=creator_id
        )

    def group_creation_failed(self, name: str, error: str) -> None:
        self._logger.error("group_creation_failed", name=name, error=error)

    def group_updated(self, group_id: str, actor_id: str, field: str) -> None:
        self._logger.info(
            "group_updated", group_id=group_id, actor_id=actor_id, field=field
        )

    def group_deleted(
        self, group_id: str, actor_id: str, posts: int, memberships: int
    ) -> None:
        self._logger.info(
            "group_deleted",
            group_id=group_id,
            actor_id=actor_id,
            posts=posts,
            memberships=memberships,
        )

    def member_joined(self, group_id: str, user_id: str, membership_id: str) -> None:
        self._logger.info(
            "group_member_joined",
            group_id=group_id,
            user_id=user_id,
            membership_id=membership_id,
        )

    def member_left(self, group_id: str, user_id: str) -> None:
        self._logger.info("group_member_left", group_id=group_id, user_id=user_id)

    def member_removed(self, group_id: str, membership_id: str, actor_id: str) -> None:
        self._logger.info(
            "group_member_removed",
            group_id=group_id,
            membership_id=membership_id,
            actor_id=actor_id,
        )

    def member_status_changed(
        self, group_id: str, membership_id: str, status: str, actor_id: str
    ) -> None:
        self._logger.info(
            "group_member_status_changed",
            group_id=group_id,
            membership_id=membership_id,
            status=status,
            actor_id=actor_id,
        )

    def member_role_changed(
        self, group_id: str, membership_id: str, role: str, actor_id: str
    ) -> None:
        self._logger.info(
            "group_member_role_changed",
            group_id=group_id,
            membership_id=membership_id,
            role=role,
            actor_id=actor_id,
        )

    def ownership_transferred(
        self, group_id: str, previous_owner_id: str, new_owner_id: str
    ) -> None:
        self._logger.info(
            "group_ownership_transferred",
            group_id=group_id,
            previous_owner_id=previous_owner_id,
            new_owner_id=new_owner_id,
        )

    def permission_denied(
        self, group_id: str, user_id: str, operation: str, reason: str
    ) -> None:
        self._logger.warning(
            "group_permission_denied",
            group_id=group_id,
            user_id=user_id,
            operation=operation,
            reason=reason,
        )
