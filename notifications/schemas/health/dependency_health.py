"""Dependency health schema."""

from pydantic import Field

from notifications.enums import HealthStatus
from notifications.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Health status for a single dependency (database or Redis)."""

    healthy: bool = Field(..., description="Whether the dependency is healthy")
    status: HealthStatus = Field(..., description="Health status of the dependency")
    message: str = Field(..., description="Human-readable health message")
    response_time_ms: float | None = Field(
        None, description="Response time in milliseconds"
    )
