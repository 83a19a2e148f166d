"""Schemas for responses that only carry a confirmation message."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class MessageResponse(BaseSchemaModel):
    """Confirmation message."""

    message: str


class MarkAllReadResponse(MessageResponse):
    """Confirmation of a mark-all-read with the number of changed records."""

    count: int = Field(..., ge=0)
