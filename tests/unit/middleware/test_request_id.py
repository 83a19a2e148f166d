"""Unit tests for RequestIDMiddleware."""

import unittest
import uuid

from django.http import HttpResponse
from django.test import RequestFactory

from notifications.constants import REQUEST_ID_HEADER
from notifications.logging.context import get_request_id
from notifications.middleware import RequestIDMiddleware


class TestRequestIDMiddleware(unittest.TestCase):
    """Test cases for RequestIDMiddleware."""

    def setUp(self):
        """Set up test fixtures."""
        self.factory = RequestFactory()
        self.seen_request_ids = []

        def get_response(request):
            self.seen_request_ids.append(get_request_id())
            return HttpResponse("OK")

        self.middleware = RequestIDMiddleware(get_response)

    def test_generates_request_id_when_missing(self):
        """Test that a UUID is minted when the client sends none."""
        request = self.factory.get("/api/v1/health/live")

        response = self.middleware(request)

        request_id = response[REQUEST_ID_HEADER]
        self.assertEqual(str(uuid.UUID(request_id)), request_id)
        self.assertEqual(request.request_id, request_id)

    def test_propagates_incoming_request_id(self):
        """Test that an incoming X-Request-ID is reused."""
        request = self.factory.get(
            "/api/v1/health/live", HTTP_X_REQUEST_ID="client-id-123"
        )

        response = self.middleware(request)

        self.assertEqual(response[REQUEST_ID_HEADER], "client-id-123")
        self.assertEqual(self.seen_request_ids, ["client-id-123"])

    def test_request_id_is_cleared_after_response(self):
        """Test that the thread-local id does not leak between requests."""
        self.middleware(self.factory.get("/api/v1/health/live"))

        self.assertIsNone(get_request_id())

    def test_request_id_is_cleared_when_view_raises(self):
        """Test that the id is cleared even if the view fails."""

        def failing_response(request):
            raise RuntimeError("boom")

        middleware = RequestIDMiddleware(failing_response)

        with self.assertRaises(RuntimeError):
            middleware(self.factory.get("/api/v1/health/live"))

        self.assertIsNone(get_request_id())


if __name__ == "__main__":
    unittest.main()
