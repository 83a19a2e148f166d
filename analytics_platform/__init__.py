"""Django project package for the Analytics Platform notification service."""
