"""HTTP routes for reports and admin account management."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from community.application.services import ReportService, UserService
from community.application.value_objects import CurrentUser
from community.dependencies.authentication import get_current_user
from community.dependencies.services import get_report_service, get_user_service
from community.domain.value_objects import ReportId, ReportStatus, UserId
from community.presentation.reports.models import (
    FileReportRequest,
    ReportResponse,
    UpdateAccountStatusRequest,
    UpdateMentorEligibilityRequest,
)
from community.presentation.users.models import UserResponse
from shared_kernel.exceptions import DomainError
from shared_kernel.http_errors import parse_identifier, to_http_exception

router = APIRouter(prefix="/reports", tags=["reports"])
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Report filed"},
        400: {"description": "Invalid report or self-report"},
        404: {"description": "Reported user not found"},
        500: {"description": "Internal server error"},
    },
)
async def file_report(
    request: FileReportRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ReportService, Depends(get_report_service)],
) -> ReportResponse:
    """Report another user."""
    try:
        report = await service.file_report(
            category=request.category,
            description=request.description,
            reported_login=request.reported_login,
            author=current_user,
        )
        return ReportResponse.from_domain(report)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to file report",
        )


@router.get("", summary="List reports (admin)")
async def list_reports(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ReportService, Depends(get_report_service)],
    status_filter: Annotated[ReportStatus | None, Query(alias="status")] = None,
    category: str | None = None,
    author_id: str | None = None,
    reported_id: str | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[ReportResponse]:
    """List reports with one optional filter family.

    ``author_id`` or ``reported_id`` select by user, ``start`` and ``end``
    together select by time window, otherwise ``status`` and ``category``
    filter the full list.
    """
    author = parse_identifier(UserId, author_id, "user") if author_id else None
    reported = parse_identifier(UserId, reported_id, "user") if reported_id else None

    try:
        if author is not None:
            reports = await service.list_by_author(author, current_user)
        elif reported is not None:
            reports = await service.list_by_reported(reported, current_user)
        elif start is not None and end is not None:
            reports = await service.list_between(start, end, current_user)
        else:
            reports = await service.list_reports(
                current_user, status=status_filter, category=category
            )
        return [ReportResponse.from_domain(r) for r in reports]

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list reports",
        )


@router.post("/{report_id}/resolve")
async def resolve_report(
    report_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ReportService, Depends(get_report_service)],
) -> ReportResponse:
    """Mark a report as resolved (admin)."""
    report_id_obj = parse_identifier(ReportId, report_id, "report")

    try:
        report = await service.resolve_report(report_id_obj, current_user)
        return ReportResponse.from_domain(report)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to resolve report",
        )


@admin_router.get("/users/reported")
async def list_reported_users(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """List every user with at least one report against them."""
    try:
        users = await service.list_reported_users(current_user)
        return [UserResponse.from_domain(u) for u in users]

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list reported users",
        )


@admin_router.patch("/users/{user_id}/status")
async def update_account_status(
    user_id: str,
    request: UpdateAccountStatusRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Suspend, ban or restore an account."""
    user_id_obj = parse_identifier(UserId, user_id, "user")

    try:
        user = await service.update_account_status(
            user_id_obj, request.status, current_user
        )
        return UserResponse.from_domain(user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update account status",
        )


@admin_router.patch("/users/{user_id}/mentor")
async def update_mentor_eligibility(
    user_id: str,
    request: UpdateMentorEligibilityRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Grant or revoke the right to offer mentorships."""
    user_id_obj = parse_identifier(UserId, user_id, "user")

    try:
        user = await service.set_mentor_eligibility(
            user_id_obj, request.is_mentor, current_user
        )
        return UserResponse.from_domain(user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update mentor eligibility",
        )
