"""Schema for a paginated notification list."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel
from notifications.schemas.notification.notification_detail import (
    NotificationDetail,
)


class PaginationInfo(BaseSchemaModel):
    """Position of a page within the full result set."""

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    pages: int = Field(..., ge=0)


class NotificationListResponse(BaseSchemaModel):
    """One page of notifications plus the owner's unread count."""

    notifications: list[NotificationDetail]
    pagination: PaginationInfo
    unread_count: int = Field(..., ge=0)
