"""Notification model for user-facing in-app notifications.

A notification is created from a type template, optionally read, optionally
archived, and removed either explicitly or once ``expires_at`` passes.
"""

import uuid
from datetime import timedelta
from typing import ClassVar

from django.conf import settings
from django.db import models
from django.utils import timezone

from notifications.constants import (
    ACTION_TEXT_MAX_LENGTH,
    ACTION_URL_MAX_LENGTH,
    DEFAULT_EXPIRY_DAYS,
    DEFAULT_ICON,
    ICON_MAX_LENGTH,
    MESSAGE_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    USER_ID_MAX_LENGTH,
)
from notifications.enums import (
    NotificationCategory,
    NotificationPriority,
    NotificationType,
)


def default_expires_at():
    """Return the default expiry timestamp for a new notification."""
    days = getattr(settings, "NOTIFICATION_EXPIRY_DAYS", DEFAULT_EXPIRY_DAYS)
    return timezone.now() + timedelta(days=days)


class NotificationQuerySet(models.QuerySet):
    """QuerySet helpers for notification visibility rules."""

    def for_user(self, user_id: str) -> "NotificationQuerySet":
        """Restrict to a single owner."""
        return self.filter(user_id=user_id)

    def unexpired(self, now=None) -> "NotificationQuerySet":
        """Exclude notifications whose expiry has passed."""
        return self.filter(expires_at__gt=now or timezone.now())

    def active(self, now=None) -> "NotificationQuerySet":
        """Exclude archived and expired notifications."""
        return self.unexpired(now).filter(is_archived=False)

    def unread(self) -> "NotificationQuerySet":
        """Restrict to unread notifications."""
        return self.filter(is_read=False)


class Notification(models.Model):
    """A single in-app notification owned by one user.

    Attributes:
        notification_id: Unique identifier for the notification.
        user_id: Opaque identifier issued by the external identity provider.
        type: Event type the notification was created for.
        title: Rendered title (template default unless overridden).
        message: Rendered message (template default unless overridden).
        icon: Short glyph shown next to the title.
        priority: Urgency of the notification.
        category: Display grouping.
        metadata: Caller-supplied context (file name, chart name, ...).
        is_read: Whether the owner has read the notification.
        read_at: When the notification was first read.
        is_archived: Whether the owner archived the notification.
        archived_at: When the notification was archived.
        expires_at: After this instant the notification is hidden and purged.
        action_url: Optional follow-up link for the UI.
        action_text: Optional label for the follow-up link.
        created_at: When the notification was created.
        updated_at: When the notification was last updated.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    user_id = models.CharField(
        max_length=USER_ID_MAX_LENGTH,
        help_text="Owning user id from the identity provider",
    )
    type = models.CharField(
        max_length=32,
        choices=[(t.value, t.value) for t in NotificationType],
        help_text="Event type that selected the template",
    )
    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    message = models.CharField(max_length=MESSAGE_MAX_LENGTH)
    icon = models.CharField(max_length=ICON_MAX_LENGTH, default=DEFAULT_ICON)
    priority = models.CharField(
        max_length=10,
        choices=[(p.value, p.value) for p in NotificationPriority],
        default=NotificationPriority.MEDIUM.value,
    )
    category = models.CharField(
        max_length=20,
        choices=[(c.value, c.value) for c in NotificationCategory],
        default=NotificationCategory.USER_ACTION.value,
    )
    metadata = models.JSONField(
        default=dict,
        blank=True,
        help_text="Caller-supplied context for the notification",
    )
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    is_archived = models.BooleanField(default=False)
    archived_at = models.DateTimeField(null=True, blank=True)
    expires_at = models.DateTimeField(default=default_expires_at)
    action_url = models.CharField(
        max_length=ACTION_URL_MAX_LENGTH, default="", blank=True
    )
    action_text = models.CharField(
        max_length=ACTION_TEXT_MAX_LENGTH, default="", blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = NotificationQuerySet.as_manager()

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(
                fields=["user_id", "-created_at"], name="notif_user_created_idx"
            ),
            models.Index(fields=["user_id", "is_read"], name="notif_user_read_idx"),
            models.Index(fields=["type"], name="notif_type_idx"),
            models.Index(fields=["priority"], name="notif_priority_idx"),
            models.Index(fields=["expires_at"], name="notif_expires_idx"),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.type} for user {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.type}, "
            f"user={self.user_id}, "
            f"is_read={self.is_read}, "
            f"is_archived={self.is_archived})>"
        )

    @property
    def is_expired(self) -> bool:
        """Whether the expiry timestamp has passed."""
        return self.expires_at <= timezone.now()

    def mark_read(self) -> bool:
        """Mark as read if not already.

        Returns:
            True if the notification changed, False if it was already read.
        """
        if self.is_read:
            return False
        self.is_read = True
        self.read_at = timezone.now()
        self.save(update_fields=["is_read", "read_at", "updated_at"])
        return True

    def archive(self) -> bool:
        """Archive if not already.

        Returns:
            True if the notification changed, False if it was already archived.
        """
        if self.is_archived:
            return False
        self.is_archived = True
        self.archived_at = timezone.now()
        self.save(update_fields=["is_archived", "archived_at", "updated_at"])
        return True
