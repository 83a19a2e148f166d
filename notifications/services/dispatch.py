"""Best-effort notification dispatch for calling features.

Features such as file upload or chart save notify the user as a side effect
of their own success path. A notification failure must never fail or roll
back that feature, so ``notify`` logs and swallows every error.
"""

from typing import Any

from django.conf import settings

import django_rq
import structlog

from notifications.services.notification_service import get_notification_service

logger = structlog.get_logger(__name__)

CREATE_NOTIFICATION_JOB = "notifications.jobs.housekeeping_jobs.create_notification_job"


def notify(
    user_id: str,
    notification_type: str,
    custom_data: dict[str, Any] | None = None,
) -> bool:
    """Create a notification without letting failures reach the caller.

    Enqueues creation on the ``default`` RQ queue when
    ``NOTIFICATIONS_ASYNC_DISPATCH`` is enabled, otherwise creates it inline.

    Args:
        user_id: Owning user id.
        notification_type: Notification type.
        custom_data: Template data stored as metadata.

    Returns:
        True if the notification was created or queued, False on any error.
    """
    try:
        if getattr(settings, "NOTIFICATIONS_ASYNC_DISPATCH", False):
            job = django_rq.get_queue("default").enqueue(
                CREATE_NOTIFICATION_JOB,
                user_id,
                notification_type,
                custom_data,
            )
            logger.info(
                "notification_dispatch_queued",
                user_id=user_id,
                notification_type=notification_type,
                job_id=job.id,
            )
        else:
            get_notification_service().create(
                user_id, notification_type, custom_data
            )
    except Exception as e:
        logger.error(
            "notification_dispatch_failed",
            user_id=user_id,
            notification_type=notification_type,
            error=str(e),
            error_type=type(e).__name__,
        )
        return False

    return True
