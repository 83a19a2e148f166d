"""Database models for the notifications app."""

from notifications.models.notification import Notification, NotificationQuerySet

__all__ = ["Notification", "NotificationQuerySet"]
