"""Protocol for authentication observability.

Defines the interface for domain probes that capture authentication events
for the get_current_user dependency.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class AuthenticationProbe(Protocol):
    """Domain probe for request authentication."""

    def user_authenticated(self, user_id: str, login: str) -> None:
        """Record that a request carried a valid token for an active user."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record that a request could not be authenticated."""
        ...

    def restricted_account_rejected(self, user_id: str, status: str) -> None:
        """Record that a suspended or banned account tried to act."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_authenticated(self, user_id: str, login: str) -> None:
        self._logger.debug("user_authenticated", user_id=user_id, login=login)

    def authentication_failed(self, reason: str) -> None:
        self._logger.warning("authentication_failed", reason=reason)

    def restricted_account_rejected(self, user_id: str, status: str) -> None:
        self._logger.warning(
            "restricted_account_rejected", user_id=user_id, status=status
        )
