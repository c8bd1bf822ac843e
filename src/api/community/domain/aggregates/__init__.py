"""Community domain aggregates.

Exports the aggregates of the community bounded context.
"""

from community.domain.aggregates.content import Comment, Post, validate_content
from community.domain.aggregates.group import Group
from community.domain.aggregates.membership import Membership
from community.domain.aggregates.notification import Notification
from community.domain.aggregates.profile import Profile
from community.domain.aggregates.report import Report
from community.domain.aggregates.user import User

__all__ = [
    "Comment",
    "Group",
    "Membership",
    "Notification",
    "Post",
    "Profile",
    "Report",
    "User",
    "validate_content",
]
