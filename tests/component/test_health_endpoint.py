"""Component tests for health check endpoints."""

from unittest.mock import patch

from django.db.utils import OperationalError
from django.test import Client, TestCase

from notifications.services import health_service


class TestHealthCheckEndpoints(TestCase):
    """Component tests for /health/live and /health/ready."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()
        health_service._cache.clear()

    def tearDown(self):
        """Drop cached results so other tests probe afresh."""
        health_service._cache.clear()

    def test_liveness_returns_alive(self):
        """Test GET /health/live returns 200 with alive status."""
        response = self.client.get("/api/v1/health/live")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "alive"})

    def test_readiness_returns_ready_when_dependencies_healthy(self):
        """Test GET /health/ready reports ready with both dependencies."""
        response = self.client.get("/api/v1/health/ready")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["ready"])
        self.assertEqual(data["status"], "ready")
        self.assertFalse(data["degraded"])
        self.assertEqual(set(data["dependencies"]), {"database", "redis"})
        self.assertIn("responseTimeMs", data["dependencies"]["database"])

    @patch("notifications.services.health_service.connection")
    def test_readiness_degraded_when_database_down(self, mock_connection):
        """Test GET /health/ready stays 200 but degraded without a database."""
        mock_connection.ensure_connection.side_effect = OperationalError("down")

        response = self.client.get("/api/v1/health/ready")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["ready"])
        self.assertEqual(data["status"], "degraded")
        self.assertFalse(data["dependencies"]["database"]["healthy"])
        self.assertEqual(data["dependencies"]["database"]["status"], "unhealthy")
