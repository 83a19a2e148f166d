"""Schema for a single notification as returned by the API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class NotificationDetail(BaseSchemaModel):
    """A stored notification."""

    notification_id: UUID = Field(
        ..., description="Unique identifier for the notification"
    )
    user_id: str = Field(..., description="Owning user id")
    type: str = Field(..., description="Notification type")
    title: str
    message: str
    icon: str
    priority: str
    category: str
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="Caller-supplied context"
    )
    is_read: bool
    read_at: datetime | None = None
    is_archived: bool
    archived_at: datetime | None = None
    expires_at: datetime
    action_url: str = ""
    action_text: str = ""
    created_at: datetime
    updated_at: datetime
