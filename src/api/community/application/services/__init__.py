"""Application services for the community bounded context.

Application services orchestrate domain aggregates and repositories to
fulfill use cases. They own transaction boundaries.
"""

from community.application.services.content_service import ContentService
from community.application.services.group_service import GroupService
from community.application.services.notification_service import NotificationService
from community.application.services.report_service import ReportService
from community.application.services.user_service import AccessToken, UserService

__all__ = [
    "AccessToken",
    "ContentService",
    "GroupService",
    "NotificationService",
    "ReportService",
    "UserService",
]
