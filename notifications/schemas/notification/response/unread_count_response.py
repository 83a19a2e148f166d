"""Schema for the unread count response."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class UnreadCountResponse(BaseSchemaModel):
    """Number of active unread notifications."""

    count: int = Field(..., ge=0)
