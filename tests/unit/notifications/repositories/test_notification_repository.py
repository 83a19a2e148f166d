"""Unit tests for NotificationRepository."""

from datetime import timedelta
from unittest.mock import patch
from uuid import uuid4

from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone

from notifications.exceptions import NotificationNotFoundError, NotificationStoreError
from notifications.models import Notification
from notifications.repositories import NotificationRepository
from tests.factories import NotificationFactory


class TestNotificationRepository(TestCase):
    """Test cases for NotificationRepository."""

    def setUp(self):
        """Set up test fixtures."""
        self.repository = NotificationRepository()
        self.user_id = "auth0|repo-user"

    def test_get_accepts_uuid_and_string(self):
        """Test lookup by UUID instance and by its string form."""
        notification = NotificationFactory.create()

        self.assertEqual(
            self.repository.get(notification.notification_id), notification
        )
        self.assertEqual(
            self.repository.get(str(notification.notification_id)), notification
        )

    def test_get_returns_archived_notifications(self):
        """Test that get ignores visibility rules."""
        notification = NotificationFactory.create(is_archived=True)

        self.assertEqual(
            self.repository.get(notification.notification_id), notification
        )

    def test_get_missing_raises_not_found(self):
        """Test that unknown and malformed ids raise NotFound."""
        with self.assertRaises(NotificationNotFoundError):
            self.repository.get(uuid4())
        with self.assertRaises(NotificationNotFoundError):
            self.repository.get("12345")

    def test_active_for_user_applies_visibility(self):
        """Test that archived and expired notifications are excluded."""
        active = NotificationFactory.create(user_id=self.user_id)
        NotificationFactory.create(user_id=self.user_id, is_archived=True)
        NotificationFactory.create(
            user_id=self.user_id, expires_at=timezone.now() - timedelta(seconds=1)
        )

        self.assertEqual(list(self.repository.active_for_user(self.user_id)), [active])

    def test_page_returns_slice_and_total(self):
        """Test slicing with total count."""
        NotificationFactory.create_batch(5, user_id=self.user_id)
        queryset = self.repository.filter_active(self.user_id)

        items, total = self.repository.page(queryset, offset=3, limit=10)

        self.assertEqual(len(items), 2)
        self.assertEqual(total, 5)

    def test_equal_timestamps_page_without_gaps(self):
        """Test pages over identical created_at values cover every row once."""
        same = timezone.now() - timedelta(minutes=5)
        created = [
            NotificationFactory.create(user_id=self.user_id, created_at=same)
            for _ in range(6)
        ]
        queryset = self.repository.filter_active(self.user_id)

        seen = []
        for offset in (0, 2, 4):
            items, _ = self.repository.page(queryset, offset=offset, limit=2)
            seen.extend(n.notification_id for n in items)

        self.assertEqual(
            seen, sorted((n.notification_id for n in created), reverse=True)
        )

    def test_bulk_insert_is_atomic(self):
        """Test that an invalid row rolls back the rows before it."""
        rows = [
            NotificationFactory.build_kwargs(user_id="u1"),
            NotificationFactory.build_kwargs(user_id="u2"),
        ]

        original_create = Notification.objects.create
        calls = []

        def failing_second(**kwargs):
            calls.append(kwargs)
            if len(calls) == 2:
                raise DatabaseError("constraint violated")
            return original_create(**kwargs)

        with patch.object(Notification.objects, "create", side_effect=failing_second):
            with self.assertRaises(NotificationStoreError) as ctx:
                self.repository.bulk_insert(rows)

        self.assertEqual(ctx.exception.operation, "bulk_insert")
        self.assertEqual(Notification.objects.count(), 0)

    def test_delete_missing_raises_not_found(self):
        """Test that deleting an unknown id raises NotFound."""
        with self.assertRaises(NotificationNotFoundError):
            self.repository.delete(uuid4())

    def test_aggregates_ignore_archived(self):
        """Test type and priority aggregates over active notifications."""
        NotificationFactory.create(user_id=self.user_id, type="welcome")
        NotificationFactory.create(
            user_id=self.user_id,
            type="welcome",
            priority="high",
            is_read=True,
            read_at=timezone.now(),
        )
        NotificationFactory.create(user_id=self.user_id, type="error", is_archived=True)

        by_type = self.repository.aggregate_by_type(self.user_id)
        by_priority = self.repository.aggregate_by_priority(self.user_id)

        self.assertEqual(
            by_type, [{"type": "welcome", "count": 2, "unread_count": 1}]
        )
        self.assertEqual(
            by_priority,
            [{"priority": "high", "count": 1}, {"priority": "medium", "count": 1}],
        )

    def test_delete_expired_uses_given_instant(self):
        """Test that the sweep compares against the supplied time."""
        soon = timezone.now() + timedelta(hours=1)
        NotificationFactory.create(expires_at=soon)

        self.assertEqual(self.repository.delete_expired(), 0)
        self.assertEqual(
            self.repository.delete_expired(now=soon + timedelta(seconds=1)), 1
        )

    def test_database_errors_are_wrapped(self):
        """Test that read failures surface as NotificationStoreError."""
        with patch.object(
            Notification.objects, "filter", side_effect=DatabaseError("gone away")
        ):
            with self.assertRaises(NotificationStoreError) as ctx:
                self.repository.delete_archived_before(timezone.now())

        self.assertEqual(ctx.exception.operation, "delete_archived_before")
        self.assertIn("gone away", ctx.exception.detail)
