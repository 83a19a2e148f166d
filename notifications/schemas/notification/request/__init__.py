"""Request schemas for the notification API."""
