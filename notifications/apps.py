"""Django application configuration for notifications."""

import atexit

from django.apps import AppConfig
from django.conf import settings

import structlog

logger = structlog.get_logger(__name__)


class NotificationsConfig(AppConfig):
    """Configuration class for the notifications application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "notifications"
    verbose_name = "Notifications"

    def ready(self) -> None:
        """Configure logging and start the process-wide lifecycle service."""
        from notifications.logging import setup_logging  # noqa: PLC0415
        from notifications.repositories import (  # noqa: PLC0415
            NotificationRepository,
        )
        from notifications.services.notification_service import (  # noqa: PLC0415
            NotificationService,
            set_notification_service,
        )

        if getattr(settings, "STRUCTURED_LOGGING", False):
            setup_logging()

        service = NotificationService(NotificationRepository())
        set_notification_service(service)
        service.init()
        atexit.register(service.close)

        logger.info("notification_service_ready")
