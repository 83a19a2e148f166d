"""In-app notification lifecycle app for the Analytics Platform."""
