"""Domain-Oriented Observability for the community application layer.

Probes for application service operations following Domain-Oriented
Observability patterns.
"""

from community.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from community.application.observability.content_service_probe import (
    ContentServiceProbe,
    DefaultContentServiceProbe,
)
from community.application.observability.group_service_probe import (
    DefaultGroupServiceProbe,
    GroupServiceProbe,
)
from community.application.observability.notification_service_probe import (
    DefaultNotificationServiceProbe,
    NotificationServiceProbe,
)
from community.application.observability.report_service_probe import (
    DefaultReportServiceProbe,
    ReportServiceProbe,
)
from community.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
    "ContentServiceProbe",
    "DefaultContentServiceProbe",
    "GroupServiceProbe",
    "DefaultGroupServiceProbe",
    "NotificationServiceProbe",
    "DefaultNotificationServiceProbe",
    "ReportServiceProbe",
    "DefaultReportServiceProbe",
    "UserServiceProbe",
    "DefaultUserServiceProbe",
]
