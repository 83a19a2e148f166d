"""Component tests for the notification create endpoints."""

from django.test import Client, TestCase

from notifications.models import Notification


class TestNotificationCreateEndpoint(TestCase):
    """Component tests for POST /notifications."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()
        self.url = "/api/v1/notifications"

    def _post(self, body):
        return self.client.post(self.url, body, content_type="application/json")

    def test_create_renders_template(self):
        """Test POST returns 201 with the rendered template fields."""
        response = self._post(
            {
                "userId": "auth0|user-1",
                "type": "file_upload",
                "customData": {"fileName": "sales.xlsx"},
            }
        )

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["userId"], "auth0|user-1")
        self.assertEqual(data["type"], "file_upload")
        self.assertEqual(data["title"], "📁 File Uploaded Successfully")
        self.assertIn('"sales.xlsx"', data["message"])
        self.assertEqual(data["actionUrl"], "/analysis?file=sales.xlsx")
        self.assertEqual(data["metadata"], {"fileName": "sales.xlsx"})
        self.assertFalse(data["isRead"])
        self.assertFalse(data["isArchived"])
        self.assertIsNone(data["readAt"])
        self.assertIn("notificationId", data)
        self.assertIn("expiresAt", data)
        self.assertEqual(Notification.objects.count(), 1)

    def test_explicit_fields_override_template(self):
        """Test top-level presentation fields replace template values."""
        response = self._post(
            {
                "userId": "user-1",
                "type": "welcome",
                "title": "Hello there",
                "priority": "urgent",
                "customData": {"priority": "low", "message": "From data"},
            }
        )

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["title"], "Hello there")
        self.assertEqual(data["priority"], "urgent")
        self.assertEqual(data["message"], "From data")

    def test_custom_data_strings_are_stored_unchanged(self):
        """Test surrounding whitespace in customData values is preserved."""
        response = self._post(
            {
                "userId": "user-1",
                "type": "file_upload",
                "customData": {"fileName": "  a.csv "},
            }
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["metadata"], {"fileName": "  a.csv "})
        self.assertEqual(
            Notification.objects.get().metadata, {"fileName": "  a.csv "}
        )

    def test_unknown_type_is_stored_as_info(self):
        """Test an unregistered type falls back to the info template."""
        response = self._post({"userId": "user-1", "type": "made_up"})

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["type"], "info")
        self.assertEqual(data["category"], "system")

    def test_missing_user_id_returns_400(self):
        """Test POST without userId is rejected and nothing is stored."""
        response = self._post({"type": "welcome"})

        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertEqual(data["error"], "bad_request")
        self.assertEqual(data["errors"][0]["loc"], ["userId"])
        self.assertEqual(Notification.objects.count(), 0)

    def test_missing_type_returns_400(self):
        """Test POST without type is rejected."""
        response = self._post({"userId": "user-1"})

        self.assertEqual(response.status_code, 400)

    def test_nested_custom_data_returns_400(self):
        """Test customData values must be scalars."""
        response = self._post(
            {"userId": "user-1", "type": "info", "customData": {"nested": {"a": 1}}}
        )

        self.assertEqual(response.status_code, 400)

    def test_invalid_priority_in_custom_data_returns_400(self):
        """Test an unknown priority coming from customData is rejected."""
        response = self._post(
            {"userId": "user-1", "type": "info", "customData": {"priority": "asap"}}
        )

        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertEqual(data["status"], 400)
        self.assertEqual(data["detail"], "Invalid field: priority")

    def test_overlong_title_returns_400(self):
        """Test explicit fields over the length limit are rejected."""
        response = self._post({"userId": "user-1", "type": "info", "title": "x" * 101})

        self.assertEqual(response.status_code, 400)


class TestBulkNotificationCreateEndpoint(TestCase):
    """Component tests for POST /notifications/bulk."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()
        self.url = "/api/v1/notifications/bulk"

    def _post(self, body):
        return self.client.post(self.url, body, content_type="application/json")

    def test_bulk_create_one_per_distinct_user(self):
        """Test duplicates are collapsed and order is preserved."""
        response = self._post(
            {"userIds": ["a", "b", "a", "c"], "type": "system_update"}
        )

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["message"], "Created 3 notification(s)")
        self.assertEqual([n["userId"] for n in data["notifications"]], ["a", "b", "c"])
        self.assertEqual(Notification.objects.count(), 3)

    def test_empty_user_ids_returns_400(self):
        """Test an empty recipient list is rejected."""
        response = self._post({"userIds": [], "type": "system_update"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(Notification.objects.count(), 0)

    def test_blank_user_id_rejects_whole_batch(self):
        """Test one blank user id rejects the whole request."""
        response = self._post({"userIds": ["a", "  "], "type": "system_update"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(Notification.objects.count(), 0)


class TestWelcomeNotificationEndpoint(TestCase):
    """Component tests for POST /notifications/welcome/{userId}."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()

    def test_welcome_creates_notification(self):
        """Test the welcome notification is created for the path user."""
        response = self.client.post("/api/v1/notifications/welcome/new-user")

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["userId"], "new-user")
        self.assertEqual(data["type"], "welcome")
        self.assertEqual(data["actionUrl"], "/dashboard")
        self.assertEqual(data["actionText"], "Get Started")
