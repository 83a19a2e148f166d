"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "analytics_platform.settings_test")
django.setup()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def notification_service():
    """Provide a lifecycle service backed by the test database."""
    from notifications.repositories import NotificationRepository
    from notifications.services import NotificationService

    return NotificationService(NotificationRepository())
