"""Domain probe for JWT validation operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to JWT token validation.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class JWTValidatorProbe(Protocol):
    """Domain probe for JWT validation operations."""

    def token_validated(self, user_id: str) -> None:
        """Record that a token was successfully validated."""
        ...

    def token_validation_failed(self, reason: str) -> None:
        """Record that token validation failed."""
        ...


class DefaultJWTValidatorProbe:
    """Default implementation of JWTValidatorProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def token_validated(self, user_id: str) -> None:
        """Record that a token was successfully validated."""
        self._logger.debug("jwt_token_validated", user_id=user_id)

    def token_validation_failed(self, reason: str) -> None:
        """Record that token validation failed."""
        self._logger.warning("jwt_token_validation_failed", reason=reason)
