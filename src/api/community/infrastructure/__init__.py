"""Infrastructure layer for the community bounded context.

SQLAlchemy repository implementations of the community ports.
"""

from community.infrastructure.comment_repository import CommentRepository
from community.infrastructure.group_repository import GroupRepository
from community.infrastructure.membership_repository import MembershipRepository
from community.infrastructure.notification_repository import NotificationRepository
from community.infrastructure.post_repository import PostRepository
from community.infrastructure.profile_repository import ProfileRepository
from community.infrastructure.report_repository import ReportRepository
from community.infrastructure.user_repository import UserRepository

__all__ = [
    "CommentRepository",
    "GroupRepository",
    "MembershipRepository",
    "NotificationRepository",
    "PostRepository",
    "ProfileRepository",
    "ReportRepository",
    "UserRepository",
]
