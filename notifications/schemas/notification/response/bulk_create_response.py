"""Schema for the bulk create response."""

from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.notification.notification_detail import (
    NotificationDetail,
)


class BulkCreateResponse(BaseSchemaModel):
    """Created notifications, one per distinct user id."""

    message: str
    notifications: list[NotificationDetail]
