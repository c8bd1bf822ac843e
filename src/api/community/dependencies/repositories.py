"""Repository providers for the community bounded context.

Every provider depends on get_write_session, so FastAPI's per-request
dependency cache hands all repositories and services the same session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from community.infrastructure import (
    CommentRepository,
    GroupRepository,
    MembershipRepository,
    NotificationRepository,
    PostRepository,
    ProfileRepository,
    ReportRepository,
    UserRepository,
)
from infrastructure.database.dependencies import get_write_session

Session = Annotated[AsyncSession, Depends(get_write_session)]


def get_user_repository(session: Session) -> UserRepository:
    return UserRepository(session=session)


def get_profile_repository(session: Session) -> ProfileRepository:
    return ProfileRepository(session=session)


def get_group_repository(session: Session) -> GroupRepository:
    return GroupRepository(session=session)


def get_membership_repository(session: Session) -> MembershipRepository:
    return MembershipRepository(session=session)


def get_post_repository(session: Session) -> PostRepository:
    return PostRepository(session=session)


def get_comment_repository(session: Session) -> CommentRepository:
    return CommentRepository(session=session)


def get_report_repository(session: Session) -> ReportRepository:
    return ReportRepository(session=session)


def get_notification_repository(session: Session) -> NotificationRepository:
    return NotificationRepository(session=session)
