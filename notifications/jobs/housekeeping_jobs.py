"""Background jobs for notification creation and housekeeping.

These jobs are executed by RQ workers (``python manage.py rqworker default``)
and by the in-process scheduler. Each job returns a small result dict so the
outcome is visible in the django-rq dashboard.
"""

from typing import Any

import structlog

from notifications.services.notification_service import get_notification_service

logger = structlog.get_logger(__name__)


def create_notification_job(
    user_id: str,
    notification_type: str,
    custom_data: dict[str, Any] | None = None,
) -> dict[str, str]:
    """Create a notification queued by ``dispatch.notify``.

    Raises:
        NotificationValidationError: If the queued payload is invalid.
        NotificationStoreError: If the insert fails; RQ records the failure.
    """
    notification = get_notification_service().create(
        user_id, notification_type, custom_data
    )

    logger.info(
        "notification_job_completed",
        notification_id=str(notification.notification_id),
        user_id=user_id,
        notification_type=notification.type,
    )

    return {"notification_id": str(notification.notification_id)}


def purge_expired_notifications_job() -> dict[str, int]:
    """Delete every notification past its expiry."""
    deleted = get_notification_service().purge_expired()
    return {"deleted": deleted}


def cleanup_archived_notifications_job(
    older_than_days: int | None = None,
) -> dict[str, int]:
    """Delete archived notifications older than the retention window."""
    deleted = get_notification_service().cleanup(older_than_days)
    return {"deleted": deleted}
