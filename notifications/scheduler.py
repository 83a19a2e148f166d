"""In-process housekeeping scheduler.

Runs the expiry sweep on a fixed interval and the archived-notification
cleanup once a day. Jobs call the management commands so the logic stays in
one place and can also be run by cron or by hand.

Only one scheduler runs per process. With several Gunicorn workers, enable it
on a single instance (``ENABLE_SCHEDULER``) or schedule the commands
externally instead.
"""

from django.conf import settings
from django.core.management import call_command

import structlog
from apscheduler.schedulers.background import BackgroundScheduler

logger = structlog.get_logger(__name__)

PURGE_EXPIRED_JOB_ID = "purge_expired_notifications"
CLEANUP_ARCHIVED_JOB_ID = "cleanup_archived_notifications"

_scheduler: BackgroundScheduler | None = None


def start_scheduler() -> BackgroundScheduler | None:
    """Start the scheduler unless disabled or already running.

    Returns:
        The running scheduler, or None when ``ENABLE_SCHEDULER`` is off.
    """
    global _scheduler

    if not getattr(settings, "ENABLE_SCHEDULER", False):
        logger.info("scheduler_disabled")
        return None

    if _scheduler is not None:
        logger.info("scheduler_already_running")
        return _scheduler

    sweep_minutes = getattr(settings, "NOTIFICATION_SWEEP_INTERVAL_MINUTES", 60)
    cleanup_hour = getattr(settings, "NOTIFICATION_CLEANUP_HOUR", 2)

    scheduler = BackgroundScheduler(timezone=settings.TIME_ZONE)
    scheduler.add_job(
        run_purge_expired,
        trigger="interval",
        minutes=sweep_minutes,
        id=PURGE_EXPIRED_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    scheduler.add_job(
        run_cleanup_archived,
        trigger="cron",
        hour=cleanup_hour,
        minute=0,
        id=CLEANUP_ARCHIVED_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    _scheduler = scheduler

    logger.info(
        "scheduler_started",
        sweep_interval_minutes=sweep_minutes,
        cleanup_hour=cleanup_hour,
    )

    return scheduler


def stop_scheduler() -> None:
    """Shut the scheduler down if it is running."""
    global _scheduler

    if _scheduler is None:
        return

    _scheduler.shutdown(wait=False)
    _scheduler = None
    logger.info("scheduler_stopped")


def run_purge_expired() -> None:
    """Scheduled wrapper for the expiry sweep."""
    call_command("purge_expired_notifications")


def run_cleanup_archived() -> None:
    """Scheduled wrapper for the archived cleanup."""
    call_command("cleanup_notifications")
