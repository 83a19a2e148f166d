"""Limits and defaults for notification records."""

TITLE_MAX_LENGTH = 100
MESSAGE_MAX_LENGTH = 500
ICON_MAX_LENGTH = 16
ACTION_TEXT_MAX_LENGTH = 100
ACTION_URL_MAX_LENGTH = 500
USER_ID_MAX_LENGTH = 255

DEFAULT_ICON = "🔔"
DEFAULT_EXPIRY_DAYS = 30
DEFAULT_CLEANUP_DAYS = 30

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
