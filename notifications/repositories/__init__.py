"""Repositories for notification persistence."""

from notifications.repositories.notification_repository import NotificationRepository

__all__ = ["NotificationRepository"]
