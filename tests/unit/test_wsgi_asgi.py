"""Unit tests for the WSGI and ASGI entry points."""

import unittest

from django.core.handlers.asgi import ASGIHandler
from django.core.handlers.wsgi import WSGIHandler

from analytics_platform import asgi, wsgi


class TestApplicationEntryPoints(unittest.TestCase):
    """Tests for the server-facing application objects."""

    def test_wsgi_application(self):
        """Test the WSGI application object."""
        self.assertIsInstance(wsgi.application, WSGIHandler)

    def test_asgi_application(self):
        """Test the ASGI application object."""
        self.assertIsInstance(asgi.application, ASGIHandler)


if __name__ == "__main__":
    unittest.main()
