"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for registration, login and account administration.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def user_registered(self, user_id: str, login: str) -> None:
        """Record that a new user registered."""
        ...

    def registration_failed(self, login: str, error: str) -> None:
        """Record that a registration attempt was rejected."""
        ...

    def login_succeeded(self, user_id: str, login: str) -> None:
        """Record that a user authenticated."""
        ...

    def login_failed(self, login: str) -> None:
        """Record that an authentication attempt failed."""
        ...

    def account_updated(self, user_id: str) -> None:
        """Record that a user edited their account or profile."""
        ...

    def account_status_changed(
        self, user_id: str, status: str, actor_id: str
    ) -> None:
        """Record that an admin changed a user's account status."""
        ...

    def mentor_eligibility_changed(
        self, user_id: str, is_mentor: bool, actor_id: str
    ) -> None:
        """Record that an admin changed a user's mentor eligibility."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_registered(self, user_id: str, login: str) -> None:
        self._logger.info("user_registered", user_id=user_id, login=login)

    def registration_failed(self, login: str, error: str) -> None:
        self._logger.warning("user_registration_failed", login=login, error=error)

    def login_succeeded(self, user_id: str, login: str) -> None:
        self._logger.info("user_login_succeeded", user_id=user_id, login=login)

    def login_failed(self, login: str) -> None:
        self._logger.warning("user_login_failed", login=login)

    def account_updated(self, user_id: str) -> None:
        self._logger.info("user_account_updated", user_id=user_id)

    def account_status_changed(
        self, user_id: str, status: str, actor_id: str
    ) -> None:
        self._logger.info(
            "user_account_status_changed",
            user_id=user_id,
            status=status,
            actor_id=actor_id,
        )

    def mentor_eligibility_changed(
        self, user_id: str, is_mentor: bool, actor_id: str
    ) -> None:
        self._logger.info(
            "user_mentor_eligibility_changed",
            user_id=user_id,
            is_mentor=is_mentor,
            actor_id=actor_id,
        )
