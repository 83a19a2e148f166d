"""Python client for the notification API and its local state container."""

from notifications.client.notification_client import NotificationApiClient
from notifications.client.notification_context import NotificationContext

__all__ = ["NotificationApiClient", "NotificationContext"]
