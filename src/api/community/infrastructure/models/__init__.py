"""SQLAlchemy ORM models for the community bounded context.

These models map to database tables and are used by repository implementations.
"""

from community.infrastructure.models.content import CommentModel, PostModel
from community.infrastructure.models.group import GroupModel, MembershipModel
from community.infrastructure.models.report import NotificationModel, ReportModel
from community.infrastructure.models.user import ProfileModel, UserModel

__all__ = [
    "CommentModel",
    "GroupModel",
    "MembershipModel",
    "NotificationModel",
    "PostModel",
    "ProfileModel",
    "ReportModel",
    "UserModel",
]
