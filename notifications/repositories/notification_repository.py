"""Repository for notification database queries.

Every read the lifecycle service performs goes through the ``active``
visibility rule (not archived, not expired). Database failures are wrapped
in ``NotificationStoreError`` so callers see one error type per failure mode.
"""

import uuid
from collections.abc import Callable, Iterable
from datetime import datetime
from functools import wraps
from typing import Any, TypeVar

from django.db import DatabaseError, transaction
from django.db.models import Count, Q
from django.utils import timezone

import structlog

from notifications.exceptions.notification_exceptions import (
    NotificationNotFoundError,
    NotificationStoreError,
)
from notifications.models import Notification, NotificationQuerySet

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _store_operation(func: Callable[..., T]) -> Callable[..., T]:
    """Wrap database errors raised by a repository method."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except DatabaseError as e:
            logger.error(
                "notification_store_error",
                operation=func.__name__,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise NotificationStoreError(func.__name__, e) from e

    return wrapper


def _parse_notification_id(notification_id: Any) -> uuid.UUID:
    """Coerce an id to a UUID; anything malformed is simply not found."""
    if isinstance(notification_id, uuid.UUID):
        return notification_id
    try:
        return uuid.UUID(str(notification_id))
    except ValueError as e:
        raise NotificationNotFoundError(str(notification_id)) from e


class NotificationRepository:
    """Encapsulates notification persistence for the lifecycle service."""

    @_store_operation
    def insert(self, **fields: Any) -> Notification:
        """Insert a single notification."""
        return Notification.objects.create(**fields)

    @_store_operation
    def bulk_insert(self, rows: Iterable[dict[str, Any]]) -> list[Notification]:
        """Insert many notifications in one transaction (all or nothing).

        Rows are created individually inside the transaction so that
        ``created_at`` is populated on every returned instance on all
        database backends.
        """
        with transaction.atomic():
            return [Notification.objects.create(**row) for row in rows]

    @_store_operation
    def get(self, notification_id: Any) -> Notification:
        """Fetch a notification by id regardless of visibility.

        Raises:
            NotificationNotFoundError: If no notification has this id.
        """
        try:
            return Notification.objects.get(
                notification_id=_parse_notification_id(notification_id)
            )
        except Notification.DoesNotExist as e:
            raise NotificationNotFoundError(str(notification_id)) from e

    def active_for_user(self, user_id: str) -> NotificationQuerySet:
        """Active (not archived, not expired) notifications for a user."""
        return Notification.objects.for_user(user_id).active()

    @_store_operation
    def filter_active(
        self,
        user_id: str,
        unread_only: bool = False,
        notification_type: str | None = None,
        priority: str | None = None,
        category: str | None = None,
    ) -> NotificationQuerySet:
        """Active notifications for a user narrowed by the list filters."""
        queryset = self.active_for_user(user_id)
        if unread_only:
            queryset = queryset.unread()
        if notification_type:
            queryset = queryset.filter(type=notification_type)
        if priority:
            queryset = queryset.filter(priority=priority)
        if category:
            queryset = queryset.filter(category=category)
        return queryset.order_by("-created_at", "-notification_id")

    @_store_operation
    def page(
        self, queryset: NotificationQuerySet, offset: int, limit: int
    ) -> tuple[list[Notification], int]:
        """Return one slice of a queryset plus the total row count."""
        total = queryset.count()
        return list(queryset[offset : offset + limit]), total

    @_store_operation
    def count_unread(self, user_id: str) -> int:
        """Count active unread notifications for a user."""
        return self.active_for_user(user_id).unread().count()

    @_store_operation
    def mark_read(self, notification: Notification) -> bool:
        """Mark one notification read; False if it already was."""
        return notification.mark_read()

    @_store_operation
    def mark_all_read(self, user_id: str) -> int:
        """Mark every active unread notification of a user read."""
        now = timezone.now()
        return (
            self.active_for_user(user_id)
            .unread()
            .update(is_read=True, read_at=now, updated_at=now)
        )

    @_store_operation
    def archive(self, notification: Notification) -> bool:
        """Archive one notification; False if it already was."""
        return notification.archive()

    @_store_operation
    def delete(self, notification_id: Any) -> None:
        """Permanently delete one notification.

        Raises:
            NotificationNotFoundError: If no notification has this id.
        """
        deleted, _ = Notification.objects.filter(
            notification_id=_parse_notification_id(notification_id)
        ).delete()
        if not deleted:
            raise NotificationNotFoundError(str(notification_id))

    @_store_operation
    def aggregate_by_type(self, user_id: str) -> list[dict[str, Any]]:
        """Count and unread-count of non-archived notifications per type."""
        rows = (
            self.active_for_user(user_id)
            .order_by()
            .values("type")
            .annotate(
                count=Count("notification_id"),
                unread_count=Count("notification_id", filter=Q(is_read=False)),
            )
            .order_by("type")
        )
        return list(rows)

    @_store_operation
    def aggregate_by_priority(self, user_id: str) -> list[dict[str, Any]]:
        """Count of non-archived notifications per priority."""
        rows = (
            self.active_for_user(user_id)
            .order_by()
            .values("priority")
            .annotate(count=Count("notification_id"))
            .order_by("priority")
        )
        return list(rows)

    @_store_operation
    def delete_expired(self, now: datetime | None = None) -> int:
        """Delete every notification whose expiry has passed."""
        deleted, _ = Notification.objects.filter(
            expires_at__lte=now or timezone.now()
        ).delete()
        return deleted

    @_store_operation
    def delete_archived_before(self, cutoff: datetime) -> int:
        """Delete archived notifications created before the cutoff."""
        deleted, _ = Notification.objects.filter(
            is_archived=True, created_at__lt=cutoff
        ).delete()
        return deleted
