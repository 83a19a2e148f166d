"""Enumerations for the notifications app."""

from notifications.enums.health_status import HealthStatus
from notifications.enums.notification import (
    NotificationCategory,
    NotificationPriority,
    NotificationType,
)

__all__ = [
    "HealthStatus",
    "NotificationCategory",
    "NotificationPriority",
    "NotificationType",
]
