"""Exception handling utilities for the notification service."""

from notifications.exceptions.handlers import custom_exception_handler
from notifications.exceptions.notification_exceptions import (
    NotificationClientError,
    NotificationError,
    NotificationNotFoundError,
    NotificationStoreError,
    NotificationValidationError,
)

__all__ = [
    "NotificationClientError",
    "NotificationError",
    "NotificationNotFoundError",
    "NotificationStoreError",
    "NotificationValidationError",
    "custom_exception_handler",
]
