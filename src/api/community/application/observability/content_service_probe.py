"""Protocol for content application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class ContentServiceProbe(Protocol):
    """Domain probe for post and comment operations."""

    def post_created(self, post_id: str, group_id: str, author_id: str) -> None:
        ...

    def post_edited(self, post_id: str, author_id: str) -> None:
        ...

    def post_deleted(self, post_id: str, requester_id: str, comments: int) -> None:
        ...

    def comment_created(self, comment_id: str, post_id: str, author_id: str) -> None:
        ...

    def comment_edited(self, comment_id: str, author_id: str) -> None:
        ...

    def comment_deleted(self, comment_id: str, requester_id: str) -> None:
        ...

    def permission_denied(self, resource_id: str, user_id: str, operation: str) -> None:
        ...


class DefaultContentServiceProbe:
    """Default implementation of ContentServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def post_created(self, post_id: str, group_id: str, author_id: str) -> None:
        self._logger.info(
            "post_created", post_id=post_id, group_id=group_id, author_id=author_id
        )

    def post_edited(self, post_id: str, author_id: str) -> None:
        self._logger.info("post_edited", post_id=post_id, author_id=author_id)

    def post_deleted(self, post_id: str, requester_id: str, comments: int) -> None:
        self._logger.info(
            "post_deleted",
            post_id=post_id,
            requester_id=requester_id,
            comments=comments,
        )

    def comment_created(self, comment_id: str, post_id: str, author_id: str) -> None:
        self._logger.info(
            "comment_created",
            comment_id=comment_id,
            post_id=post_id,
            author_id=author_id,
        )

    def comment_edited(self, comment_id: str, author_id: str) -> None:
        self._logger.info("comment_edited", comment_id=comment_id, author_id=author_id)

    def comment_deleted(self, comment_id: str, requester_id: str) -> None:
        self._logger.info(
            "comment_deleted", comment_id=comment_id, requester_id=requester_id
        )

    def permission_denied(self, resource_id: str, user_id: str, operation: str) -> None:
        self._logger.warning(
            "content_permission_denied",
            resource_id=resource_id,
            user_id=user_id,
            operation=operation,
        )
