"""Query parameters for listing a user's notifications."""

from typing import Any

from pydantic import Field, field_validator

from notifications.enums import NotificationCategory, NotificationPriority
from notifications.schemas.base_schema_model import BaseSchemaModel


class ListNotificationsParams(BaseSchemaModel):
    """Validated ``page``, ``limit``, ``unreadOnly`` and filter parameters.

    A missing ``limit`` falls back to ``NOTIFICATION_DEFAULT_PAGE_SIZE``; a
    ``limit`` above the configured maximum is clamped rather than rejected.
    Blank filter values mean no filter.
    """

    page: int = Field(1, ge=1)
    limit: int | None = Field(None, ge=1)
    unread_only: bool = False
    type: str | None = Field(None, min_length=1)
    priority: NotificationPriority | None = None
    category: NotificationCategory | None = None

    @field_validator("type", "priority", "category", mode="before")
    @classmethod
    def blank_filter_to_none(cls, v: Any) -> Any:
        """Treat an empty filter value as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
