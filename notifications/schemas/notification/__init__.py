"""Notification schemas."""

from notifications.schemas.notification.notification_detail import (
    NotificationDetail,
)
from notifications.schemas.notification.notification_fields import (
    NotificationFields,
)
from notifications.schemas.notification.request.bulk_notification_request import (
    BulkNotificationRequest,
)
from notifications.schemas.notification.request.list_notifications_params import (
    ListNotificationsParams,
)
from notifications.schemas.notification.request.notification_create_request import (
    NotificationCreateRequest,
)
from notifications.schemas.notification.response.bulk_create_response import (
    BulkCreateResponse,
)
from notifications.schemas.notification.response.message_response import (
    MarkAllReadResponse,
    MessageResponse,
)
from notifications.schemas.notification.response.notification_list_response import (
    NotificationListResponse,
    PaginationInfo,
)
from notifications.schemas.notification.response.notification_stats_response import (
    NotificationStatsResponse,
    PriorityStat,
    TypeStat,
)
from notifications.schemas.notification.response.template_list_response import (
    TemplateInfo,
    TemplateListResponse,
)
from notifications.schemas.notification.response.unread_count_response import (
    UnreadCountResponse,
)

__all__ = [
    "BulkCreateResponse",
    "BulkNotificationRequest",
    "ListNotificationsParams",
    "MarkAllReadResponse",
    "MessageResponse",
    "NotificationCreateRequest",
    "NotificationDetail",
    "NotificationFields",
    "NotificationListResponse",
    "NotificationStatsResponse",
    "PaginationInfo",
    "PriorityStat",
    "TemplateInfo",
    "TemplateListResponse",
    "TypeStat",
    "UnreadCountResponse",
]
