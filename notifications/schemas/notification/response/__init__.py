"""Response schemas for the notification API."""
