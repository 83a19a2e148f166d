"""Notification-related enumerations.

This module contains the fixed vocabularies stored on every notification:
the event type that drives template resolution, the priority, and the
display category.
"""

from enum import Enum


class NotificationType(str, Enum):
    """Event types a notification can be created for.

    The type selects the template at creation time and is stored
    permanently afterwards.
    """

    WELCOME = "welcome"
    FILE_UPLOAD = "file_upload"
    CHART_DOWNLOAD = "chart_download"
    CHART_SAVE = "chart_save"
    CHART_DELETE = "chart_delete"
    PROFILE_UPDATE = "profile_update"
    SYSTEM_UPDATE = "system_update"
    SECURITY_ALERT = "security_alert"
    DATA_EXPORT = "data_export"
    ANALYSIS_COMPLETE = "analysis_complete"
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"

    @classmethod
    def values(cls) -> list[str]:
        """Return all type values in declaration order."""
        return [member.value for member in cls]


class NotificationPriority(str, Enum):
    """Notification urgency, used for badges and ordering in the UI."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class NotificationCategory(str, Enum):
    """Broad grouping used to filter notifications in the dropdown."""

    SYSTEM = "system"
    USER_ACTION = "user_action"
    SECURITY = "security"
    UPDATE = "update"
    ERROR = "error"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
