"""HTTP client for the notification API."""

from typing import Any
from urllib.parse import quote

import requests
import structlog

from notifications.exceptions import (
    NotificationClientError,
    NotificationNotFoundError,
    NotificationValidationError,
)

logger = structlog.get_logger(__name__)


def _segment(value: Any) -> str:
    """Percent-encode one path segment, slashes included."""
    return quote(str(value), safe="")


class NotificationApiClient:
    """Client for the notification lifecycle endpoints under ``/api/v1``.

    Responses are returned as decoded JSON with camelCase keys, exactly as
    the API emits them.
    """

    def __init__(self, base_url: str, timeout: float = 10):
        """Initialize notification API client.

        Args:
            base_url: API root, e.g. ``http://localhost:8000/api/v1``
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def list_notifications(
        self,
        user_id: str,
        page: int = 1,
        limit: int = 20,
        unread_only: bool = False,
        **filters: str,
    ) -> dict[str, Any]:
        """Fetch one page of a user's active notifications.

        Args:
            user_id: Owning user id
            page: 1-based page number
            limit: Page size
            unread_only: Only return unread notifications
            **filters: ``type``, ``priority`` or ``category``

        Returns:
            ``{notifications, pagination, unreadCount}``
        """
        params = {
            "page": page,
            "limit": limit,
            "unreadOnly": "true" if unread_only else "false",
            **{k: v for k, v in filters.items() if v},
        }
        return self._request(
            "GET", f"/notifications/{_segment(user_id)}", params=params
        )

    def get_unread_count(self, user_id: str) -> int:
        """Return the number of active unread notifications."""
        data = self._request(
            "GET", f"/notifications/{_segment(user_id)}/unread-count"
        )
        return int(data.get("count", 0))

    def create_notification(
        self,
        user_id: str,
        notification_type: str,
        custom_data: dict[str, Any] | None = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        """Create a notification; ``overrides`` use camelCase field names."""
        body = {
            "userId": user_id,
            "type": notification_type,
            "customData": custom_data or {},
            **overrides,
        }
        return self._request("POST", "/notifications", json_data=body)

    def bulk_create(
        self,
        user_ids: list[str],
        notification_type: str,
        custom_data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Create the same notification for many users."""
        body = {
            "userIds": list(user_ids),
            "type": notification_type,
            "customData": custom_data or {},
        }
        return self._request("POST", "/notifications/bulk", json_data=body)

    def create_welcome(self, user_id: str) -> dict[str, Any]:
        """Create the welcome notification for a new user."""
        return self._request("POST", f"/notifications/welcome/{_segment(user_id)}")

    def mark_as_read(self, notification_id: str) -> dict[str, Any]:
        """Mark a notification read."""
        return self._request(
            "PATCH",
            f"/notifications/{_segment(notification_id)}/read",
            resource_id=notification_id,
        )

    def mark_all_as_read(self, user_id: str) -> dict[str, Any]:
        """Mark every active unread notification of a user read."""
        return self._request(
            "PATCH", f"/notifications/{_segment(user_id)}/read-all"
        )

    def archive(self, notification_id: str) -> dict[str, Any]:
        """Archive a notification."""
        return self._request(
            "PATCH",
            f"/notifications/{_segment(notification_id)}/archive",
            resource_id=notification_id,
        )

    def delete(self, notification_id: str) -> dict[str, Any]:
        """Permanently delete a notification."""
        return self._request(
            "DELETE",
            f"/notifications/{_segment(notification_id)}",
            resource_id=notification_id,
        )

    def get_stats(self, user_id: str) -> dict[str, Any]:
        """Return ``{byType, byPriority}`` for a user."""
        return self._request("GET", f"/notifications/{_segment(user_id)}/stats")

    def list_templates(self) -> dict[str, Any]:
        """Return every registered notification template."""
        return self._request("GET", "/notifications/templates")

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        resource_id: str | None = None,
    ) -> dict[str, Any]:
        """Make an HTTP request and decode the JSON body.

        Raises:
            NotificationNotFoundError: For 404 responses
            NotificationValidationError: For 400 responses
            NotificationClientError: For any other error status
            requests.Timeout: For timeout errors
            requests.ConnectionError: For connection errors
        """
        url = f"{self.base_url}{path}"

        try:
            response = requests.request(
                method=method,
                url=url,
                headers={"Accept": "application/json"},
                params=params,
                json=json_data,
                timeout=self.timeout,
            )
        except requests.Timeout:
            logger.error(
                "notification_api_timeout",
                method=method,
                url=url,
                timeout=self.timeout,
            )
            raise
        except requests.ConnectionError as e:
            logger.error(
                "notification_api_connection_failed",
                method=method,
                url=url,
                error=str(e),
            )
            raise

        logger.debug(
            "notification_api_response",
            method=method,
            url=url,
            status_code=response.status_code,
        )

        if response.status_code == 404:
            raise NotificationNotFoundError(resource_id or path)

        if response.status_code == 400:
            raise NotificationValidationError(_error_message(response))

        if response.status_code >= 400:
            logger.error(
                "notification_api_error",
                method=method,
                url=url,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise NotificationClientError(
                f"Notification API returned {response.status_code}: "
                f"{_error_message(response)}",
                status_code=response.status_code,
            )

        return response.json()


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("message") or body)
    return str(body)
