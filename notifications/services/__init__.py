"""Services for the notifications app."""

from notifications.services.health_service import HealthService, health_service
from notifications.services.notification_service import (
    NotificationPage,
    NotificationService,
    NotificationStats,
    get_notification_service,
    set_notification_service,
)

# dispatch is not exported here: it imports django_rq, which is only needed
# by callers that notify as a side effect. Import it from its module.

__all__ = [
    "HealthService",
    "NotificationPage",
    "NotificationService",
    "NotificationStats",
    "get_notification_service",
    "health_service",
    "set_notification_service",
]
