"""Fields shared by the single and bulk create requests."""

from typing import Annotated, Any

from pydantic import Field, StringConstraints

from notifications.constants import (
    ACTION_TEXT_MAX_LENGTH,
    ACTION_URL_MAX_LENGTH,
    ICON_MAX_LENGTH,
    MESSAGE_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)
from notifications.enums import NotificationCategory, NotificationPriority
from notifications.schemas.base_schema_model import BaseSchemaModel

# Metadata strings are stored exactly as sent
MetadataText = Annotated[str, StringConstraints(strip_whitespace=False)]
MetadataValue = MetadataText | int | float | bool | None

OVERRIDE_FIELD_NAMES = {
    "title",
    "message",
    "icon",
    "priority",
    "category",
    "action_url",
    "action_text",
}


class NotificationFields(BaseSchemaModel):
    """Notification type, template data and optional explicit overrides.

    Any override that is set replaces the value from the type's template.
    """

    type: str = Field(..., min_length=1, description="Notification type")
    custom_data: dict[str, MetadataValue] | None = Field(
        None,
        description="Template data, stored as metadata (scalar values only)",
    )
    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    message: str | None = Field(None, min_length=1, max_length=MESSAGE_MAX_LENGTH)
    icon: str | None = Field(None, min_length=1, max_length=ICON_MAX_LENGTH)
    priority: NotificationPriority | None = None
    category: NotificationCategory | None = None
    action_url: str | None = Field(None, max_length=ACTION_URL_MAX_LENGTH)
    action_text: str | None = Field(None, max_length=ACTION_TEXT_MAX_LENGTH)

    def overrides(self) -> dict[str, Any]:
        """Return the explicit presentation fields that were provided."""
        return self.model_dump(include=OVERRIDE_FIELD_NAMES, exclude_none=True)
