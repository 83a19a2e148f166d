"""Unit tests for housekeeping and creation jobs."""

from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from notifications.exceptions import NotificationValidationError
from notifications.jobs.housekeeping_jobs import (
    cleanup_archived_notifications_job,
    create_notification_job,
    purge_expired_notifications_job,
)
from notifications.models import Notification
from tests.factories import NotificationFactory


class TestHousekeepingJobs(TestCase):
    """Test cases for RQ job functions."""

    def test_create_notification_job(self):
        """Test that the job creates the notification and returns its id."""
        result = create_notification_job("u1", "data_export", {"fileName": "a.csv"})

        notification = Notification.objects.get()
        self.assertEqual(result, {"notification_id": str(notification.notification_id)})
        self.assertIn("a.csv", notification.message)

    def test_create_notification_job_propagates_validation_errors(self):
        """Test that invalid payloads fail the job so RQ records it."""
        with self.assertRaises(NotificationValidationError):
            create_notification_job("", "welcome")

    def test_purge_expired_job(self):
        """Test that the sweep job reports deleted rows."""
        NotificationFactory.create(expires_at=timezone.now() - timedelta(days=1))
        NotificationFactory.create()

        self.assertEqual(purge_expired_notifications_job(), {"deleted": 1})
        self.assertEqual(Notification.objects.count(), 1)

    def test_cleanup_archived_job(self):
        """Test that the cleanup job honours the retention window."""
        NotificationFactory.create(
            is_archived=True, created_at=timezone.now() - timedelta(days=10)
        )

        self.assertEqual(cleanup_archived_notifications_job(30), {"deleted": 0})
        self.assertEqual(cleanup_archived_notifications_job(5), {"deleted": 1})
