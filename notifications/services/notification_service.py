"""Notification lifecycle service.

This module provides the NotificationService class, the only component that
mutates notifications in ways clients observe:
- Creation from type templates, single or bulk
- Paginated, filtered listing of a user's active notifications
- Read and archive transitions, deletion
- Per-user statistics and housekeeping (archived cleanup, expiry sweep)
"""

import math
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from django.conf import settings
from django.db import connections
from django.utils import timezone

import structlog

from notifications.constants import (
    ACTION_TEXT_MAX_LENGTH,
    ACTION_URL_MAX_LENGTH,
    DEFAULT_CLEANUP_DAYS,
    DEFAULT_PAGE_SIZE,
    ICON_MAX_LENGTH,
    MAX_PAGE_SIZE,
    MESSAGE_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    USER_ID_MAX_LENGTH,
)
from notifications.enums import (
    NotificationCategory,
    NotificationPriority,
    NotificationType,
)
from notifications.exceptions.notification_exceptions import (
    NotificationValidationError,
)
from notifications.models import Notification
from notifications.repositories import NotificationRepository
from notifications.scheduler import start_scheduler, stop_scheduler
from notifications.services.notification_templates import (
    FALLBACK_TYPE,
    is_known_type,
    resolve_template,
)

logger = structlog.get_logger(__name__)

# Caller fields that replace the template's value, keyed by wire name
OVERRIDE_FIELDS = {
    "title": "title",
    "message": "message",
    "icon": "icon",
    "priority": "priority",
    "category": "category",
    "actionUrl": "action_url",
    "actionText": "action_text",
}

_SCALAR_TYPES = (str, int, float, bool)

_FIELD_MAX_LENGTHS = {
    "title": TITLE_MAX_LENGTH,
    "message": MESSAGE_MAX_LENGTH,
    "icon": ICON_MAX_LENGTH,
    "action_url": ACTION_URL_MAX_LENGTH,
    "action_text": ACTION_TEXT_MAX_LENGTH,
}


@dataclass
class NotificationPage:
    """One page of a user's active notifications."""

    items: list[Notification]
    page: int
    limit: int
    total: int
    pages: int
    unread_count: int


@dataclass
class NotificationStats:
    """Aggregates over a user's active notifications."""

    by_type: list[dict[str, Any]] = field(default_factory=list)
    by_priority: list[dict[str, Any]] = field(default_factory=list)


class NotificationService:
    """Service for the notification lifecycle.

    Constructed once per process with its repository and handed to the
    delivery surface. ``init`` and ``close`` bracket the store connection's
    lifetime and start or stop the housekeeping scheduler.
    """

    def __init__(self, repository: NotificationRepository | None = None) -> None:
        """Initialize notification service.

        Args:
            repository: Persistence layer (default: a new NotificationRepository).
        """
        self.repository = repository or NotificationRepository()
        self._initialized = False

    def init(self) -> None:
        """Start background housekeeping if enabled."""
        if self._initialized:
            return

        if getattr(settings, "ENABLE_SCHEDULER", False):
            start_scheduler()

        self._initialized = True
        logger.info("notification_service_initialized")

    def close(self) -> None:
        """Stop housekeeping and release database connections."""
        if not self._initialized:
            return

        stop_scheduler()
        connections.close_all()
        self._initialized = False
        logger.info("notification_service_closed")

    # Creation

    def create(
        self,
        user_id: str,
        notification_type: str,
        custom_data: dict[str, Any] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> Notification:
        """Create a notification from its type template.

        Explicit fields always win over the template: any of ``title``,
        ``message``, ``icon``, ``priority``, ``category``, ``actionUrl`` or
        ``actionText`` present in ``overrides`` or in ``custom_data``
        replaces the template value, and ``overrides`` win over
        ``custom_data``. ``custom_data`` is stored as the notification's
        metadata.

        Args:
            user_id: Owning user id.
            notification_type: Notification type; unknown types use ``info``.
            custom_data: Template data and metadata (scalar values only).
            overrides: Explicit presentation fields.

        Returns:
            The created Notification.

        Raises:
            NotificationValidationError: If a required field is missing or a
                field is malformed.
            NotificationStoreError: If the insert fails.
        """
        self._validate_user_id(user_id)
        fields = self._build_fields(notification_type, custom_data, overrides)

        notification = self.repository.insert(user_id=user_id, **fields)

        logger.info(
            "notification_created",
            notification_id=str(notification.notification_id),
            user_id=user_id,
            notification_type=notification.type,
            priority=notification.priority,
        )

        return notification

    def bulk_create(
        self,
        user_ids: list[str],
        notification_type: str,
        custom_data: dict[str, Any] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> list[Notification]:
        """Create the same notification for many users.

        The template is resolved once. Duplicate user ids are collapsed
        (first occurrence wins) and all rows are inserted in a single
        transaction: either every notification is created or none is.

        Raises:
            NotificationValidationError: If ``user_ids`` is empty or any id is
                blank, or another field is malformed.
            NotificationStoreError: If the batch insert fails.
        """
        if not user_ids:
            raise NotificationValidationError(
                "userIds must contain at least one user id", field="userIds"
            )
        for user_id in user_ids:
            self._validate_user_id(user_id, field_name="userIds")

        unique_user_ids = list(dict.fromkeys(user_ids))
        fields = self._build_fields(notification_type, custom_data, overrides)

        notifications = self.repository.bulk_insert(
            {"user_id": user_id, **fields} for user_id in unique_user_ids
        )

        logger.info(
            "notifications_bulk_created",
            notification_type=fields["type"],
            requested=len(user_ids),
            created=len(notifications),
        )

        return notifications

    # Queries

    def list_notifications(
        self,
        user_id: str,
        page: int = 1,
        page_size: int | None = None,
        unread_only: bool = False,
        notification_type: str | None = None,
        priority: str | None = None,
        category: str | None = None,
    ) -> NotificationPage:
        """List a user's active notifications, newest first.

        ``page`` is 1-based and clamped to at least 1; ``page_size`` is
        clamped to ``[1, NOTIFICATION_MAX_PAGE_SIZE]``. A page past the end
        is empty.
        """
        page = max(1, page)
        limit = self._clamp_page_size(page_size)

        queryset = self.repository.filter_active(
            user_id,
            unread_only=unread_only,
            notification_type=notification_type,
            priority=priority,
            category=category,
        )
        items, total = self.repository.page(queryset, (page - 1) * limit, limit)
        unread_count = self.repository.count_unread(user_id)

        logger.debug(
            "notifications_listed",
            user_id=user_id,
            page=page,
            limit=limit,
            total=total,
            returned=len(items),
        )

        return NotificationPage(
            items=items,
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit),
            unread_count=unread_count,
        )

    def unread_count(self, user_id: str) -> int:
        """Count a user's active unread notifications."""
        return self.repository.count_unread(user_id)

    def stats(self, user_id: str) -> NotificationStats:
        """Aggregate a user's active notifications by type and priority."""
        return NotificationStats(
            by_type=self.repository.aggregate_by_type(user_id),
            by_priority=self.repository.aggregate_by_priority(user_id),
        )

    # Transitions

    def mark_read(self, notification_id: Any) -> Notification:
        """Mark a notification read; a no-op if it already is.

        Raises:
            NotificationNotFoundError: If the notification does not exist.
        """
        notification = self.repository.get(notification_id)
        changed = self.repository.mark_read(notification)

        logger.info(
            "notification_marked_read",
            notification_id=str(notification.notification_id),
            user_id=notification.user_id,
            changed=changed,
        )

        return notification

    def mark_all_read(self, user_id: str) -> int:
        """Mark every active unread notification of a user read.

        Returns:
            Number of notifications that changed.
        """
        updated = self.repository.mark_all_read(user_id)

        logger.info("notifications_marked_all_read", user_id=user_id, count=updated)

        return updated

    def archive(self, notification_id: Any) -> Notification:
        """Archive a notification, hiding it from active listings.

        Raises:
            NotificationNotFoundError: If the notification does not exist.
        """
        notification = self.repository.get(notification_id)
        changed = self.repository.archive(notification)

        logger.info(
            "notification_archived",
            notification_id=str(notification.notification_id),
            user_id=notification.user_id,
            changed=changed,
        )

        return notification

    def delete(self, notification_id: Any) -> None:
        """Permanently delete a notification.

        Raises:
            NotificationNotFoundError: If the notification does not exist.
        """
        self.repository.delete(notification_id)

        logger.info("notification_deleted", notification_id=str(notification_id))

    # Housekeeping

    def cleanup(self, older_than_days: int | None = None) -> int:
        """Delete archived notifications created more than N days ago.

        Returns:
            Number of deleted notifications.
        """
        if older_than_days is None:
            older_than_days = getattr(
                settings, "NOTIFICATION_CLEANUP_DAYS", DEFAULT_CLEANUP_DAYS
            )
        if older_than_days < 0:
            raise NotificationValidationError(
                "older_than_days must not be negative", field="older_than_days"
            )

        cutoff = timezone.now() - timedelta(days=older_than_days)
        deleted = self.repository.delete_archived_before(cutoff)

        logger.info(
            "archived_notifications_cleaned",
            older_than_days=older_than_days,
            deleted=deleted,
        )

        return deleted

    def purge_expired(self) -> int:
        """Delete every notification past its expiry, archived or not."""
        deleted = self.repository.delete_expired()

        logger.info("expired_notifications_purged", deleted=deleted)

        return deleted

    # Helpers used by calling features

    def create_welcome_notification(self, user_id: str) -> Notification:
        """Greet a newly registered user."""
        return self.create(user_id, NotificationType.WELCOME.value)

    def create_file_upload_notification(
        self, user_id: str, file_name: str, file_size: int | None = None
    ) -> Notification:
        """Confirm a file upload."""
        return self.create(
            user_id,
            NotificationType.FILE_UPLOAD.value,
            {"fileName": file_name, "fileSize": file_size, "action": "upload"},
        )

    def create_chart_download_notification(
        self, user_id: str, chart_type: str, chart_name: str | None = None
    ) -> Notification:
        """Confirm a chart download."""
        return self.create(
            user_id,
            NotificationType.CHART_DOWNLOAD.value,
            {"chartType": chart_type, "chartName": chart_name, "action": "download"},
        )

    def create_chart_save_notification(
        self, user_id: str, chart_name: str, chart_type: str | None = None
    ) -> Notification:
        """Confirm a chart was saved."""
        return self.create(
            user_id,
            NotificationType.CHART_SAVE.value,
            {"chartName": chart_name, "chartType": chart_type, "action": "save"},
        )

    def create_chart_delete_notification(
        self, user_id: str, chart_name: str
    ) -> Notification:
        """Confirm a chart was deleted."""
        return self.create(
            user_id,
            NotificationType.CHART_DELETE.value,
            {"chartName": chart_name, "action": "delete"},
        )

    def create_profile_update_notification(self, user_id: str) -> Notification:
        """Confirm a profile update."""
        return self.create(user_id, NotificationType.PROFILE_UPDATE.value)

    def create_data_export_notification(
        self, user_id: str, file_name: str, export_format: str | None = None
    ) -> Notification:
        """Confirm a data export."""
        return self.create(
            user_id,
            NotificationType.DATA_EXPORT.value,
            {"fileName": file_name, "format": export_format, "action": "export"},
        )

    def create_analysis_complete_notification(
        self, user_id: str, analysis_type: str | None = None
    ) -> Notification:
        """Announce finished analysis results."""
        return self.create(
            user_id,
            NotificationType.ANALYSIS_COMPLETE.value,
            {"analysisType": analysis_type, "action": "analyze"},
        )

    def create_security_alert_notification(
        self,
        user_id: str,
        alert_type: str,
        metadata: dict[str, Any] | None = None,
    ) -> Notification:
        """Warn a user about account activity."""
        return self.create(
            user_id,
            NotificationType.SECURITY_ALERT.value,
            {"alertType": alert_type, **(metadata or {})},
        )

    def create_error_notification(
        self, user_id: str, message: str, metadata: dict[str, Any] | None = None
    ) -> Notification:
        """Report a failure to the user."""
        return self.create(
            user_id,
            NotificationType.ERROR.value,
            {"message": message, **(metadata or {})},
        )

    def create_success_notification(
        self, user_id: str, message: str, metadata: dict[str, Any] | None = None
    ) -> Notification:
        """Report a success to the user."""
        return self.create(
            user_id,
            NotificationType.SUCCESS.value,
            {"message": message, **(metadata or {})},
        )

    # Internal helpers

    def _build_fields(
        self,
        notification_type: str,
        custom_data: dict[str, Any] | None,
        overrides: dict[str, Any] | None,
    ) -> dict[str, Any]:
        """Resolve the template and apply caller overrides."""
        if not notification_type or not isinstance(notification_type, str):
            raise NotificationValidationError(
                "type is required and must be a non-empty string", field="type"
            )

        metadata = self._validate_metadata(custom_data)

        stored_type = notification_type
        if not is_known_type(notification_type):
            logger.warning(
                "unknown_notification_type",
                notification_type=notification_type,
                fallback_type=FALLBACK_TYPE,
            )
            stored_type = FALLBACK_TYPE

        fields = resolve_template(notification_type, metadata).as_dict()

        for source in (metadata, overrides or {}):
            for wire_name, field_name in OVERRIDE_FIELDS.items():
                value = source.get(wire_name, source.get(field_name))
                if value is not None and value != "":
                    fields[field_name] = str(value)

        self._validate_presentation(fields)

        return {"type": stored_type, "metadata": metadata, **fields}

    @staticmethod
    def _validate_user_id(user_id: Any, field_name: str = "userId") -> None:
        if not isinstance(user_id, str) or not user_id.strip():
            raise NotificationValidationError(
                f"{field_name} is required and must be a non-empty string",
                field=field_name,
            )
        if len(user_id) > USER_ID_MAX_LENGTH:
            raise NotificationValidationError(
                f"{field_name} must be at most {USER_ID_MAX_LENGTH} characters",
                field=field_name,
            )

    @staticmethod
    def _validate_metadata(custom_data: dict[str, Any] | None) -> dict[str, Any]:
        """Accept only a flat mapping of string keys to scalar values."""
        if custom_data is None:
            return {}
        if not isinstance(custom_data, dict):
            raise NotificationValidationError(
                "customData must be an object", field="customData"
            )
        for key, value in custom_data.items():
            if not isinstance(key, str):
                raise NotificationValidationError(
                    "customData keys must be strings", field="customData"
                )
            if value is not None and not isinstance(value, _SCALAR_TYPES):
                raise NotificationValidationError(
                    f"customData.{key} must be a string, number, boolean or null",
                    field=f"customData.{key}",
                )
        return dict(custom_data)

    @staticmethod
    def _validate_presentation(fields: dict[str, Any]) -> None:
        if fields["priority"] not in NotificationPriority.values():
            raise NotificationValidationError(
                f"priority must be one of {NotificationPriority.values()}",
                field="priority",
            )
        if fields["category"] not in NotificationCategory.values():
            raise NotificationValidationError(
                f"category must be one of {NotificationCategory.values()}",
                field="category",
            )
        for field_name, max_length in _FIELD_MAX_LENGTHS.items():
            if len(fields[field_name]) > max_length:
                raise NotificationValidationError(
                    f"{field_name} must be at most {max_length} characters",
                    field=field_name,
                )

    @staticmethod
    def _clamp_page_size(page_size: int | None) -> int:
        max_size = getattr(settings, "NOTIFICATION_MAX_PAGE_SIZE", MAX_PAGE_SIZE)
        if page_size is None:
            page_size = getattr(
                settings, "NOTIFICATION_DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE
            )
        return min(max(1, page_size), max_size)


_notification_service: NotificationService | None = None


def set_notification_service(service: NotificationService | None) -> None:
    """Install the process-wide service built at application start."""
    global _notification_service
    _notification_service = service


def get_notification_service() -> NotificationService:
    """Return the process-wide service, constructing one if none was installed."""
    global _notification_service
    if _notification_service is None:
        _notification_service = NotificationService(NotificationRepository())
    return _notification_service
