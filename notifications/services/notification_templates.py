"""Notification template registry.

Maps every notification type to its default presentation: title, message,
icon, priority, category and an optional follow-up action. Titles, messages
and action URLs may reference caller data with ``${field}`` placeholders;
each template declares defaults for the placeholders it uses so a rendered
notification never shows a raw placeholder.

Resolution is a pure function of ``(type, data)``. Unknown types resolve to
the ``info`` template instead of failing.
"""

from dataclasses import asdict, dataclass
from string import Template
from typing import Any, NotRequired, TypedDict

from notifications.constants import (
    ACTION_URL_MAX_LENGTH,
    MESSAGE_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)
from notifications.enums import (
    NotificationCategory,
    NotificationPriority,
    NotificationType,
)


class NotificationTemplateConfig(TypedDict):
    """Default presentation for a notification type."""

    title: str
    message: str
    icon: str
    priority: str
    category: str
    action_text: NotRequired[str]
    action_url: NotRequired[str]
    defaults: NotRequired[dict[str, str]]


@dataclass(frozen=True)
class ResolvedTemplate:
    """A template rendered against caller data."""

    title: str
    message: str
    icon: str
    priority: str
    category: str
    action_text: str = ""
    action_url: str = ""

    def as_dict(self) -> dict[str, str]:
        """Return the template fields as a plain dict."""
        return asdict(self)


FALLBACK_TYPE = NotificationType.INFO.value

NOTIFICATION_TEMPLATES: dict[str, NotificationTemplateConfig] = {
    NotificationType.WELCOME.value: {
        "title": "🎉 Welcome to Analytics Platform!",
        "message": (
            "Get started by uploading your first Excel file to create "
            "amazing visualizations."
        ),
        "icon": "🎉",
        "priority": NotificationPriority.MEDIUM.value,
        "category": NotificationCategory.SYSTEM.value,
        "action_text": "Get Started",
        "action_url": "/dashboard",
    },
    NotificationType.FILE_UPLOAD.value: {
        "title": "📁 File Uploaded Successfully",
        "message": (
            'Your file "${fileName}" has been uploaded and is ready for analysis.'
        ),
        "icon": "📁",
        "priority": NotificationPriority.MEDIUM.value,
        "category": NotificationCategory.USER_ACTION.value,
        "action_text": "View Data",
        "action_url": "/analysis?file=${fileName}",
        "defaults": {"fileName": "untitled"},
    },
    NotificationType.CHART_DOWNLOAD.value: {
        "title": "📊 Chart Downloaded",
        "message": "Your ${chartType} chart has been downloaded successfully.",
        "icon": "📊",
        "priority": NotificationPriority.LOW.value,
        "category": NotificationCategory.USER_ACTION.value,
        "defaults": {"chartType": "new"},
    },
    NotificationType.CHART_SAVE.value: {
        "title": "💾 Chart Saved",
        "message": 'Your chart "${chartName}" has been saved to your collection.',
        "icon": "💾",
        "priority": NotificationPriority.LOW.value,
        "category": NotificationCategory.USER_ACTION.value,
        "action_text": "View Charts",
        "action_url": "/saved-charts",
        "defaults": {"chartName": "Untitled chart"},
    },
    NotificationType.CHART_DELETE.value: {
        "title": "🗑️ Chart Deleted",
        "message": 'Chart "${chartName}" has been removed from your collection.',
        "icon": "🗑️",
        "priority": NotificationPriority.LOW.value,
        "category": NotificationCategory.USER_ACTION.value,
        "defaults": {"chartName": "Untitled chart"},
    },
    NotificationType.PROFILE_UPDATE.value: {
        "title": "👤 Profile Updated",
        "message": "Your profile information has been updated successfully.",
        "icon": "👤",
        "priority": NotificationPriority.LOW.value,
        "category": NotificationCategory.USER_ACTION.value,
        "action_text": "View Profile",
        "action_url": "/settings",
    },
    NotificationType.SYSTEM_UPDATE.value: {
        "title": "🔄 System Update",
        "message": (
            "Analytics Platform has been updated with new features and "
            "improvements."
        ),
        "icon": "🔄",
        "priority": NotificationPriority.MEDIUM.value,
        "category": NotificationCategory.UPDATE.value,
    },
    NotificationType.SECURITY_ALERT.value: {
        "title": "🔒 Security Alert",
        "message": "We detected a new sign-in from a different device or location.",
        "icon": "🔒",
        "priority": NotificationPriority.HIGH.value,
        "category": NotificationCategory.SECURITY.value,
        "action_text": "Review Activity",
        "action_url": "/settings",
    },
    NotificationType.DATA_EXPORT.value: {
        "title": "📤 Data Export Complete",
        "message": "Your data has been exported successfully. File: ${fileName}",
        "icon": "📤",
        "priority": NotificationPriority.MEDIUM.value,
        "category": NotificationCategory.USER_ACTION.value,
        "defaults": {"fileName": "export"},
    },
    NotificationType.ANALYSIS_COMPLETE.value: {
        "title": "🔍 Analysis Complete",
        "message": (
            "Your data analysis has been completed. Results are now available."
        ),
        "icon": "🔍",
        "priority": NotificationPriority.MEDIUM.value,
        "category": NotificationCategory.USER_ACTION.value,
        "action_text": "View Results",
        "action_url": "/dashboard",
    },
    NotificationType.ERROR.value: {
        "title": "❌ Error Occurred",
        "message": "${message}",
        "icon": "❌",
        "priority": NotificationPriority.HIGH.value,
        "category": NotificationCategory.ERROR.value,
        "defaults": {
            "message": "An error occurred while processing your request.",
        },
    },
    NotificationType.INFO.value: {
        "title": "ℹ️ Information",
        "message": "${message}",
        "icon": "ℹ️",
        "priority": NotificationPriority.MEDIUM.value,
        "category": NotificationCategory.SYSTEM.value,
        "defaults": {"message": "You have a new notification."},
    },
    NotificationType.SUCCESS.value: {
        "title": "✅ Success",
        "message": "${message}",
        "icon": "✅",
        "priority": NotificationPriority.LOW.value,
        "category": NotificationCategory.USER_ACTION.value,
        "defaults": {"message": "Operation completed successfully."},
    },
    NotificationType.WARNING.value: {
        "title": "⚠️ Warning",
        "message": "${message}",
        "icon": "⚠️",
        "priority": NotificationPriority.HIGH.value,
        "category": NotificationCategory.SYSTEM.value,
        "defaults": {"message": "Please review your recent activity."},
    },
}


def get_template_config(notification_type: str) -> NotificationTemplateConfig:
    """Return the raw template for a type, falling back to ``info``."""
    return NOTIFICATION_TEMPLATES.get(
        notification_type, NOTIFICATION_TEMPLATES[FALLBACK_TYPE]
    )


def is_known_type(notification_type: str) -> bool:
    """Whether the type has a dedicated template."""
    return notification_type in NOTIFICATION_TEMPLATES


def resolve_template(
    notification_type: str, data: dict[str, Any] | None = None
) -> ResolvedTemplate:
    """Render the template for a notification type against caller data.

    Args:
        notification_type: Notification type; unknown types use ``info``.
        data: Caller-supplied values for ``${field}`` placeholders. Keys with
            ``None`` or empty-string values are treated as absent.

    Returns:
        ResolvedTemplate with placeholders substituted and title/message
        truncated to their storage limits.
    """
    config = get_template_config(notification_type)

    values: dict[str, Any] = dict(config.get("defaults", {}))
    values.update(
        {k: v for k, v in (data or {}).items() if v is not None and v != ""}
    )

    def render(text: str) -> str:
        return Template(text).safe_substitute(values)

    return ResolvedTemplate(
        title=render(config["title"])[:TITLE_MAX_LENGTH],
        message=render(config["message"])[:MESSAGE_MAX_LENGTH],
        icon=config["icon"],
        priority=config["priority"],
        category=config["category"],
        action_text=config.get("action_text", ""),
        action_url=render(config.get("action_url", ""))[:ACTION_URL_MAX_LENGTH],
    )


def list_templates() -> list[dict[str, Any]]:
    """Describe every registered template for the template listing endpoint."""
    return [
        {
            "type": notification_type,
            "title": config["title"],
            "icon": config["icon"],
            "priority": config["priority"],
            "category": config["category"],
            "placeholders": sorted(config.get("defaults", {})),
            "has_action": bool(config.get("action_url")),
        }
        for notification_type, config in NOTIFICATION_TEMPLATES.items()
    ]
