"""Client-side notification state container.

Keeps a local view of one user's notifications and unread count, applies the
lifecycle operations through the API client and updates local state only
when the API call succeeds. Every failure is logged and leaves the local
state untouched, so UI code can call these methods without error handling.
"""

import threading
from datetime import UTC, datetime
from typing import Any

import requests
import structlog

from notifications.client.notification_client import NotificationApiClient
from notifications.constants import DEFAULT_PAGE_SIZE
from notifications.enums import NotificationType
from notifications.exceptions import NotificationError

logger = structlog.get_logger(__name__)

_CLIENT_ERRORS = (NotificationError, requests.RequestException, ValueError)


class NotificationContext:
    """Local notification state for one user.

    Attributes:
        notifications: Last loaded page, newest first (camelCase dicts).
        unread_count: Last known number of active unread notifications.
        loading: True while ``load_notifications`` is in flight.
        show_notifications: Whether the dropdown is open.
    """

    def __init__(
        self,
        client: NotificationApiClient,
        user_id: str,
        poll_interval: float = 30,
    ):
        """Initialize notification context.

        Args:
            client: API client used for every operation
            user_id: User whose notifications are tracked
            poll_interval: Seconds between unread-count refreshes while polling
        """
        self.client = client
        self.user_id = user_id
        self.poll_interval = poll_interval

        self.notifications: list[dict[str, Any]] = []
        self.unread_count = 0
        self.loading = False
        self.show_notifications = False

        self._lock = threading.RLock()
        self._stop_polling = threading.Event()
        self._poll_thread: threading.Thread | None = None

    # Loading

    def load_notifications(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        unread_only: bool = False,
        **filters: str,
    ) -> dict[str, Any] | None:
        """Replace the local list with one page from the API.

        Returns:
            The API response, or None if the request failed.
        """
        self.loading = True
        try:
            data = self.client.list_notifications(
                self.user_id,
                page=page,
                limit=limit,
                unread_only=unread_only,
                **filters,
            )
        except _CLIENT_ERRORS as e:
            logger.error(
                "load_notifications_failed", user_id=self.user_id, error=str(e)
            )
            return None
        finally:
            self.loading = False

        with self._lock:
            self.notifications = list(data.get("notifications") or [])
            self.unread_count = int(data.get("unreadCount") or 0)
        return data

    def load_unread_count(self) -> int | None:
        """Refresh the unread count from the API."""
        try:
            count = self.client.get_unread_count(self.user_id)
        except _CLIENT_ERRORS as e:
            logger.error(
                "load_unread_count_failed", user_id=self.user_id, error=str(e)
            )
            return None

        with self._lock:
            self.unread_count = count
        return count

    # Lifecycle operations

    def create_notification(
        self, notification_type: str, custom_data: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Create a notification for the tracked user and prepend it."""
        try:
            notification = self.client.create_notification(
                self.user_id, notification_type, custom_data
            )
        except _CLIENT_ERRORS as e:
            logger.error(
                "create_notification_failed",
                user_id=self.user_id,
                notification_type=notification_type,
                error=str(e),
            )
            return None

        with self._lock:
            self.notifications.insert(0, notification)
            if not notification.get("isRead"):
                self.unread_count += 1
        return notification

    def mark_as_read(self, notification_id: str) -> bool:
        """Mark one notification read locally and remotely."""
        try:
            updated = self.client.mark_as_read(notification_id)
        except _CLIENT_ERRORS as e:
            logger.error(
                "mark_as_read_failed", notification_id=notification_id, error=str(e)
            )
            return False

        with self._lock:
            index = self._index_of(notification_id)
            if index is not None:
                was_unread = not self.notifications[index].get("isRead")
                self.notifications[index] = updated
                if was_unread:
                    self.unread_count = max(0, self.unread_count - 1)
        return True

    def mark_all_as_read(self) -> bool:
        """Mark every notification of the tracked user read."""
        try:
            self.client.mark_all_as_read(self.user_id)
        except _CLIENT_ERRORS as e:
            logger.error("mark_all_as_read_failed", user_id=self.user_id, error=str(e))
            return False

        read_at = datetime.now(UTC).isoformat()
        with self._lock:
            self.notifications = [
                n if n.get("isRead") else {**n, "isRead": True, "readAt": read_at}
                for n in self.notifications
            ]
            self.unread_count = 0
        return True

    def archive_notification(self, notification_id: str) -> bool:
        """Archive a notification and drop it from the local list."""
        try:
            self.client.archive(notification_id)
        except _CLIENT_ERRORS as e:
            logger.error(
                "archive_notification_failed",
                notification_id=notification_id,
                error=str(e),
            )
            return False

        self._remove_local(notification_id)
        return True

    def delete_notification(self, notification_id: str) -> bool:
        """Delete a notification and drop it from the local list."""
        try:
            self.client.delete(notification_id)
        except _CLIENT_ERRORS as e:
            logger.error(
                "delete_notification_failed",
                notification_id=notification_id,
                error=str(e),
            )
            return False

        self._remove_local(notification_id)
        return True

    def toggle_notifications(self) -> bool:
        """Open or close the dropdown; returns the new state."""
        self.show_notifications = not self.show_notifications
        return self.show_notifications

    # Helpers for calling features

    def notify_file_upload(self, file_name: str, file_size: int | None = None):
        return self.create_notification(
            NotificationType.FILE_UPLOAD.value,
            {"fileName": file_name, "fileSize": file_size},
        )

    def notify_chart_download(self, chart_type: str, chart_name: str | None = None):
        return self.create_notification(
            NotificationType.CHART_DOWNLOAD.value,
            {"chartType": chart_type, "chartName": chart_name},
        )

    def notify_chart_save(self, chart_name: str, chart_type: str | None = None):
        return self.create_notification(
            NotificationType.CHART_SAVE.value,
            {"chartName": chart_name, "chartType": chart_type},
        )

    def notify_chart_delete(self, chart_name: str):
        return self.create_notification(
            NotificationType.CHART_DELETE.value, {"chartName": chart_name}
        )

    def notify_profile_update(self):
        return self.create_notification(NotificationType.PROFILE_UPDATE.value)

    def notify_data_export(self, file_name: str, export_format: str | None = None):
        return self.create_notification(
            NotificationType.DATA_EXPORT.value,
            {"fileName": file_name, "format": export_format},
        )

    def notify_analysis_complete(self, analysis_type: str | None = None):
        return self.create_notification(
            NotificationType.ANALYSIS_COMPLETE.value, {"analysisType": analysis_type}
        )

    def notify_error(self, message: str):
        return self.create_notification(
            NotificationType.ERROR.value, {"message": message}
        )

    def notify_success(self, message: str):
        return self.create_notification(
            NotificationType.SUCCESS.value, {"message": message}
        )

    # Polling

    def start_polling(self) -> None:
        """Refresh the unread count every ``poll_interval`` seconds."""
        if self._poll_thread is not None and self._poll_thread.is_alive():
            return

        self._stop_polling.clear()
        self._poll_thread = threading.Thread(
            target=self._poll,
            name=f"notification-poll-{self.user_id}",
            daemon=True,
        )
        self._poll_thread.start()
        logger.info(
            "notification_polling_started",
            user_id=self.user_id,
            poll_interval=self.poll_interval,
        )

    def stop_polling(self, timeout: float | None = None) -> None:
        """Stop the polling thread and wait for it to exit."""
        self._stop_polling.set()
        if self._poll_thread is not None:
            self._poll_thread.join(timeout)
            self._poll_thread = None
            logger.info("notification_polling_stopped", user_id=self.user_id)

    def _poll(self) -> None:
        while not self._stop_polling.wait(self.poll_interval):
            self.load_unread_count()

    def _index_of(self, notification_id: str) -> int | None:
        for index, notification in enumerate(self.notifications):
            if str(notification.get("notificationId")) == str(notification_id):
                return index
        return None

    def _remove_local(self, notification_id: str) -> None:
        with self._lock:
            index = self._index_of(notification_id)
            if index is None:
                return
            removed = self.notifications.pop(index)
            if not removed.get("isRead"):
                self.unread_count = max(0, self.unread_count - 1)
