"""Factories for test data generation."""

from datetime import timedelta
from typing import Any

from django.utils import timezone

from faker import Faker

from notifications.enums import (
    NotificationCategory,
    NotificationPriority,
    NotificationType,
)
from notifications.models import Notification

fake = Faker()


class NotificationFactory:
    """Create Notification rows with realistic fake data.

    ``created_at`` cannot be set on insert (``auto_now_add``), so it is applied
    with an update afterwards when given.
    """

    @staticmethod
    def build_kwargs(**overrides: Any) -> dict[str, Any]:
        """Return model field values for a new notification."""
        values = {
            "user_id": f"auth0|{fake.uuid4()}",
            "type": NotificationType.INFO.value,
            "title": fake.sentence(nb_words=4)[:100],
            "message": fake.sentence(nb_words=12)[:500],
            "icon": "ℹ️",
            "priority": NotificationPriority.MEDIUM.value,
            "category": NotificationCategory.SYSTEM.value,
            "metadata": {"source": fake.word()},
            "expires_at": timezone.now() + timedelta(days=30),
        }
        values.update(overrides)
        return values

    @classmethod
    def create(cls, **overrides: Any) -> Notification:
        """Insert one notification."""
        created_at = overrides.pop("created_at", None)
        notification = Notification.objects.create(**cls.build_kwargs(**overrides))
        if created_at is not None:
            Notification.objects.filter(
                notification_id=notification.notification_id
            ).update(created_at=created_at)
            notification.refresh_from_db()
        return notification

    @classmethod
    def create_batch(cls, size: int, **overrides: Any) -> list[Notification]:
        """Insert ``size`` notifications with strictly decreasing ``created_at``.

        The first notification returned is the newest.
        """
        now = timezone.now()
        return [
            cls.create(created_at=now - timedelta(seconds=index), **overrides)
            for index in range(size)
        ]
