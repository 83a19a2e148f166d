"""Unit tests for the DRF exception handler."""

import unittest
from unittest.mock import Mock, patch

from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.views import APIView

from notifications.exceptions import (
    NotificationNotFoundError,
    NotificationStoreError,
    NotificationValidationError,
)
from notifications.exceptions.handlers import custom_exception_handler


class TestCustomExceptionHandler(unittest.TestCase):
    """Test cases for custom_exception_handler."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_request = Mock()
        self.mock_request.path = "/api/v1/notifications/abc/read"
        self.mock_request.method = "PATCH"

        self.mock_view = Mock(spec=APIView)
        self.mock_view.request = self.mock_request

        self.context = {"view": self.mock_view, "request": self.mock_request}

    @patch("notifications.exceptions.handlers.get_request_id")
    def test_not_found_maps_to_404(self, mock_get_request_id):
        """Test that a missing notification becomes a 404 with the standard body."""
        mock_get_request_id.return_value = "req-1"

        response = custom_exception_handler(
            NotificationNotFoundError("abc"), self.context
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["status"], 404)
        self.assertEqual(response.data["message"], "Notification with ID abc not found")
        self.assertEqual(response.data["request_id"], "req-1")
        self.assertIn("timestamp", response.data)
        self.assertEqual(response["X-Request-ID"], "req-1")

    @patch("notifications.exceptions.handlers.get_request_id")
    def test_validation_error_maps_to_400_with_detail(self, mock_get_request_id):
        """Test that lifecycle validation errors become 400 with detail."""
        mock_get_request_id.return_value = "req-2"

        response = custom_exception_handler(
            NotificationValidationError("userId is required", field="userId"),
            self.context,
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "userId is required")
        self.assertEqual(response.data["detail"], "Invalid field: userId")

    @patch("notifications.exceptions.handlers.get_request_id")
    def test_store_error_maps_to_500_without_leaking_detail(
        self, mock_get_request_id
    ):
        """Test that store failures become a generic 500."""
        mock_get_request_id.return_value = None

        response = custom_exception_handler(
            NotificationStoreError("insert", Exception("password=secret")),
            self.context,
        )

        self.assertEqual(
            response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        self.assertNotIn("secret", str(response.data))
        self.assertNotIn("X-Request-ID", response)

    @patch("notifications.exceptions.handlers.get_request_id")
    def test_drf_exceptions_use_drf_response(self, mock_get_request_id):
        """Test that DRF's own exceptions keep DRF's handling."""
        mock_get_request_id.return_value = "req-3"

        response = custom_exception_handler(ValidationError("bad"), self.context)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response["X-Request-ID"], "req-3")

    @patch("notifications.exceptions.handlers.get_request_id")
    def test_http404_maps_to_404(self, mock_get_request_id):
        """Test that Django's Http404 is handled."""
        mock_get_request_id.return_value = "req-4"

        response = custom_exception_handler(Http404("nope"), self.context)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    @patch("notifications.exceptions.handlers.get_request_id")
    @patch("notifications.exceptions.handlers.logger")
    def test_log_levels(self, mock_logger, mock_get_request_id):
        """Test that 4xx are warnings and 5xx are errors."""
        mock_get_request_id.return_value = "req-5"

        custom_exception_handler(NotificationNotFoundError("abc"), self.context)
        custom_exception_handler(RuntimeError("boom"), self.context)

        levels = [call.args[0] for call in mock_logger.log.call_args_list]
        self.assertEqual(levels, [30, 40])


if __name__ == "__main__":
    unittest.main()
