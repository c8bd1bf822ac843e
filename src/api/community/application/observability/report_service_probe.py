"""Protocol for report application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class ReportServiceProbe(Protocol):
    """Domain probe for filing and resolving reports."""

    def report_filed(
        self, report_id: str, author_id: str, reported_id: str, category: str
    ) -> None:
        ...

    def report_rejected(self, author_id: str, error: str) -> None:
        ...

    def report_resolved(self, report_id: str, actor_id: str) -> None:
        ...


class DefaultReportServiceProbe:
    """Default implementation of ReportServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def report_filed(
        self, report_id: str, author_id: str, reported_id: str, category: str
    ) -> None:
        self._logger.info(
            "report_filed",
            report_id=report_id,
            author_id=author_id,
            reported_id=reported_id,
            category=category,
        )

    def report_rejected(self, author_id: str, error: str) -> None:
        self._logger.warning("report_rejected", author_id=author_id, error=error)

    def report_resolved(self, report_id: str, actor_id: str) -> None:
        self._logger.info("report_resolved", report_id=report_id, actor_id=actor_id)
