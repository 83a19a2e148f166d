"""Constants package for the notifications app."""

from notifications.constants.http import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SECURITY_HEADERS,
    SLOW_REQUEST_THRESHOLD,
)
from notifications.constants.notifications import (
    ACTION_TEXT_MAX_LENGTH,
    ACTION_URL_MAX_LENGTH,
    DEFAULT_CLEANUP_DAYS,
    DEFAULT_EXPIRY_DAYS,
    DEFAULT_ICON,
    DEFAULT_PAGE_SIZE,
    ICON_MAX_LENGTH,
    MAX_PAGE_SIZE,
    MESSAGE_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    USER_ID_MAX_LENGTH,
)

__all__ = [
    "ACTION_TEXT_MAX_LENGTH",
    "ACTION_URL_MAX_LENGTH",
    "DEFAULT_CLEANUP_DAYS",
    "DEFAULT_EXPIRY_DAYS",
    "DEFAULT_ICON",
    "DEFAULT_PAGE_SIZE",
    "ICON_MAX_LENGTH",
    "MAX_PAGE_SIZE",
    "MESSAGE_MAX_LENGTH",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "SECURITY_HEADERS",
    "SLOW_REQUEST_THRESHOLD",
    "TITLE_MAX_LENGTH",
    "USER_ID_MAX_LENGTH",
]
