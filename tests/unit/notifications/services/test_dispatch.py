"""Unit tests for best-effort notification dispatch."""

from unittest.mock import Mock, patch

from django.test import TestCase, override_settings

from notifications.exceptions import NotificationStoreError
from notifications.models import Notification
from notifications.services.dispatch import CREATE_NOTIFICATION_JOB, notify


class TestNotify(TestCase):
    """Test cases for notify."""

    def test_sync_dispatch_creates_notification(self):
        """Test inline creation when async dispatch is off."""
        result = notify("u1", "file_upload", {"fileName": "sales.csv"})

        self.assertTrue(result)
        notification = Notification.objects.get(user_id="u1")
        self.assertIn("sales.csv", notification.message)

    @override_settings(NOTIFICATIONS_ASYNC_DISPATCH=True)
    @patch("notifications.services.dispatch.django_rq.get_queue")
    def test_async_dispatch_enqueues_job(self, mock_get_queue):
        """Test that async dispatch enqueues on the default queue."""
        mock_queue = Mock()
        mock_queue.enqueue.return_value = Mock(id="job-1")
        mock_get_queue.return_value = mock_queue

        result = notify("u1", "chart_save", {"chartName": "Sales"})

        self.assertTrue(result)
        mock_get_queue.assert_called_once_with("default")
        mock_queue.enqueue.assert_called_once_with(
            CREATE_NOTIFICATION_JOB, "u1", "chart_save", {"chartName": "Sales"}
        )
        self.assertFalse(Notification.objects.exists())

    @patch("notifications.services.dispatch.get_notification_service")
    def test_failures_are_swallowed(self, mock_get_service):
        """Test that a store failure never reaches the calling feature."""
        mock_get_service.return_value.create.side_effect = NotificationStoreError(
            "insert", Exception("db down")
        )

        self.assertFalse(notify("u1", "file_upload"))

    def test_validation_failures_are_swallowed(self):
        """Test that an invalid payload returns False instead of raising."""
        self.assertFalse(notify("", "file_upload"))

    @override_settings(NOTIFICATIONS_ASYNC_DISPATCH=True)
    @patch("notifications.services.dispatch.django_rq.get_queue")
    def test_queue_failures_are_swallowed(self, mock_get_queue):
        """Test that an unreachable Redis does not raise."""
        mock_get_queue.return_value.enqueue.side_effect = ConnectionError("redis")

        self.assertFalse(notify("u1", "welcome"))
