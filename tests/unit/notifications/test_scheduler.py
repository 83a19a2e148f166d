"""Unit tests for the housekeeping scheduler."""

import unittest
from unittest.mock import patch

from django.test import override_settings

from notifications import scheduler


class TestScheduler(unittest.TestCase):
    """Test cases for start_scheduler and stop_scheduler."""

    def tearDown(self):
        """Make sure no scheduler leaks between tests."""
        scheduler.stop_scheduler()

    @override_settings(ENABLE_SCHEDULER=False)
    def test_disabled_scheduler_does_not_start(self):
        """Test that ENABLE_SCHEDULER=False is respected."""
        self.assertIsNone(scheduler.start_scheduler())

    @override_settings(
        ENABLE_SCHEDULER=True,
        NOTIFICATION_SWEEP_INTERVAL_MINUTES=15,
        NOTIFICATION_CLEANUP_HOUR=3,
    )
    @patch("notifications.scheduler.BackgroundScheduler")
    def test_start_registers_jobs_once(self, mock_scheduler_class):
        """Test job registration and protection against double start."""
        first = scheduler.start_scheduler()
        second = scheduler.start_scheduler()

        self.assertIs(first, second)
        mock_scheduler_class.assert_called_once()
        instance = mock_scheduler_class.return_value
        instance.start.assert_called_once()

        jobs = {call.kwargs["id"]: call for call in instance.add_job.call_args_list}
        self.assertEqual(
            set(jobs),
            {scheduler.PURGE_EXPIRED_JOB_ID, scheduler.CLEANUP_ARCHIVED_JOB_ID},
        )
        sweep = jobs[scheduler.PURGE_EXPIRED_JOB_ID]
        self.assertEqual(sweep.kwargs["trigger"], "interval")
        self.assertEqual(sweep.kwargs["minutes"], 15)
        cleanup = jobs[scheduler.CLEANUP_ARCHIVED_JOB_ID]
        self.assertEqual(cleanup.kwargs["trigger"], "cron")
        self.assertEqual(cleanup.kwargs["hour"], 3)

    @override_settings(ENABLE_SCHEDULER=True)
    @patch("notifications.scheduler.BackgroundScheduler")
    def test_stop_shuts_down(self, mock_scheduler_class):
        """Test that stop_scheduler shuts the scheduler down."""
        scheduler.start_scheduler()

        scheduler.stop_scheduler()

        mock_scheduler_class.return_value.shutdown.assert_called_once_with(wait=False)
        self.assertIsNone(scheduler._scheduler)

    @patch("notifications.scheduler.call_command")
    def test_wrappers_call_management_commands(self, mock_call_command):
        """Test that scheduled jobs delegate to management commands."""
        scheduler.run_purge_expired()
        scheduler.run_cleanup_archived()

        mock_call_command.assert_any_call("purge_expired_notifications")
        mock_call_command.assert_any_call("cleanup_notifications")


if __name__ == "__main__":
    unittest.main()
