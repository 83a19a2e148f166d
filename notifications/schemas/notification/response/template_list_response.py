"""Schema for the template listing response."""

from pydantic import Field

from notifications.schemas.base_schema_model import BaseSchemaModel


class TemplateInfo(BaseSchemaModel):
    """Summary of one notification type's template."""

    type: str
    title: str
    icon: str
    priority: str
    category: str
    placeholders: list[str] = Field(
        default_factory=list, description="Placeholder fields with defaults"
    )
    has_action: bool = False


class TemplateListResponse(BaseSchemaModel):
    """Every registered notification template."""

    templates: list[TemplateInfo]
    count: int = Field(..., ge=0)
