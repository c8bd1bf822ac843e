"""Pydantic models for reports and account administration."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from community.domain.aggregates import Report
from community.domain.value_objects import AccountStatus, ReportStatus


class FileReportRequest(BaseModel):
    """Request model for reporting another user."""

    category: str = Field(..., description="Free-text category")
    description: str = Field(..., description="What happened")
    reported_login: str = Field(..., description="Login of the reported user")


class ReportResponse(BaseModel):
    """Response model for a report."""

    id: str
    category: str
    description: str
    status: ReportStatus
    author_id: str
    reported_id: str
    created_at: datetime

    @classmethod
    def from_domain(cls, report: Report) -> ReportResponse:
        return cls(
            id=report.id.value,
            category=report.category,
            description=report.description,
            status=report.status,
            author_id=report.author_id.value,
            reported_id=report.reported_id.value,
            created_at=report.created_at,
        )


class UpdateAccountStatusRequest(BaseModel):
    """Request model for an admin changing an account status."""

    status: AccountStatus


class UpdateMentorEligibilityRequest(BaseModel):
    """Request model for an admin granting or revoking mentor eligibility."""

    is_mentor: bool
