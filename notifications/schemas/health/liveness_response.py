"""Liveness response schema."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """Response model for liveness checks."""

    status: str = Field(..., description="Liveness status")
