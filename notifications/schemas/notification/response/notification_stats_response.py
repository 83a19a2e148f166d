"""Schema for per-user notification statistics."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class TypeStat(BaseSchemaModel):
    """Counts for one notification type."""

    type: str
    count: int = Field(..., ge=0)
    unread_count: int = Field(..., ge=0)


class PriorityStat(BaseSchemaModel):
    """Count for one priority."""

    priority: str
    count: int = Field(..., ge=0)


class NotificationStatsResponse(BaseSchemaModel):
    """Active notifications aggregated by type and by priority."""

    by_type: list[TypeStat]
    by_priority: list[PriorityStat]
