"""Service providers for the community bounded context."""

from typing import Annotated

from fastapi import Depends

from community.application.services import (
    ContentService,
    GroupService,
    NotificationService,
    ReportService,
    UserService,
)
from community.dependencies.authentication import get_token_issuer
from community.dependencies.repositories import (
    Session,
    get_comment_repository,
    get_group_repository,
    get_membership_repository,
    get_notification_repository,
    get_post_repository,
    get_profile_repository,
    get_report_repository,
    get_user_repository,
)
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
from infrastructure.settings import ContentSettings, get_content_settings
from shared_kernel.auth import TokenIssuer


def get_user_service(
    session: Session,
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    profile_repo: Annotated[ProfileRepository, Depends(get_profile_repository)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> UserService:
    """Get UserService instance."""
    return UserService(
        session=session,
        user_repository=user_repo,
        profile_repository=profile_repo,
        token_issuer=token_issuer,
    )


def get_group_service(
    session: Session,
    group_repo: Annotated[GroupRepository, Depends(get_group_repository)],
    membership_repo: Annotated[
        MembershipRepository, Depends(get_membership_repository)
    ],
    post_repo: Annotated[PostRepository, Depends(get_post_repository)],
    comment_repo: Annotated[CommentRepository, Depends(get_comment_repository)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> GroupService:
    """Get GroupService instance.

    All repositories share the request's session via FastAPI dependency
    caching, so the service's transaction covers every cascade step.
    """
    return GroupService(
        session=session,
        group_repository=group_repo,
        membership_repository=membership_repo,
        post_repository=post_repo,
        comment_repository=comment_repo,
        user_repository=user_repo,
    )


def get_content_service(
    session: Session,
    group_repo: Annotated[GroupRepository, Depends(get_group_repository)],
    membership_repo: Annotated[
        MembershipRepository, Depends(get_membership_repository)
    ],
    post_repo: Annotated[PostRepository, Depends(get_post_repository)],
    comment_repo: Annotated[CommentRepository, Depends(get_comment_repository)],
    settings: Annotated[ContentSettings, Depends(get_content_settings)],
) -> ContentService:
    """Get ContentService instance with limits from content settings."""
    return ContentService(
        session=session,
        group_repository=group_repo,
        membership_repository=membership_repo,
        post_repository=post_repo,
        comment_repository=comment_repo,
        post_max_length=settings.post_max_length,
        comment_max_length=settings.comment_max_length,
        feed_size=settings.feed_size,
    )


def get_report_service(
    session: Session,
    report_repo: Annotated[ReportRepository, Depends(get_report_repository)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[ContentSettings, Depends(get_content_settings)],
) -> ReportService:
    """Get ReportService instance."""
    return ReportService(
        session=session,
        report_repository=report_repo,
        user_repository=user_repo,
        category_max_length=settings.report_category_max_length,
        description_max_length=settings.report_description_max_length,
    )


def get_notification_service(
    session: Session,
    notification_repo: Annotated[
        NotificationRepository, Depends(get_notification_repository)
    ],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> NotificationService:
    """Get NotificationService instance."""
    return NotificationService(
        session=session,
        notification_repository=notification_repo,
        user_repository=user_repo,
    )
