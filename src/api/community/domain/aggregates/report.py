"""Report aggregate: a complaint filed by one user against another."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from community.domain.exceptions import (
    ReportAlreadyResolvedError,
    SelfReportError,
)
from community.domain.value_objects import ReportId, ReportStatus, UserId
from shared_kernel.exceptions import ValidationError


@dataclass
class Report:
    """A report against a user.

    Business rules:
    - Category and description are required
    - The author can never be the reported user
    - PENDING -> RESOLVED is the only transition; RESOLVED is terminal
    """

    id: ReportId
    category: str
    description: str
    author_id: UserId
    reported_id: UserId
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def file(
        cls,
        category: str,
        description: str,
        author_id: UserId,
        reported_id: UserId,
        max_category_length: int = 100,
        max_description_length: int = 500,
    ) -> Report:
        """Factory for a new PENDING report.

        Raises:
            ValidationError: If category or description is blank or too long
            SelfReportError: If author and reported user are the same
        """
        category = (category or "").strip()
        description = (description or "").strip()

        if not description:
            raise ValidationError("The report description is required")
        if not category:
            raise ValidationError("The report category is required")
        if len(category) > max_category_length:
            raise ValidationError(
                f"The report category cannot exceed {max_category_length} characters"
            )
        if len(description) > max_description_length:
            raise ValidationError(
                "The report description cannot exceed "
                f"{max_description_length} characters"
            )
        if author_id == reported_id:
            raise SelfReportError()

        return cls(
            id=ReportId.generate(),
            category=category,
            description=description,
            author_id=author_id,
            reported_id=reported_id,
        )

    def resolve(self) -> None:
        """Mark the report as resolved.

        Raises:
            ReportAlreadyResolvedError: If the report is already resolved
        """
        if self.status == ReportStatus.RESOLVED:
            raise ReportAlreadyResolvedError(f"Report {self.id} is already resolved")
        self.status = ReportStatus.RESOLVED
