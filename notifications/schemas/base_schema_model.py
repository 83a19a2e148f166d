"""Base pydantic model shared by every request and response schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model for the notification API.

    Accepts and emits camelCase keys on the wire while keeping snake_case
    attribute names, and reads directly from model instances.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def to_response(self) -> dict:
        """Serialize with camelCase keys and JSON-compatible values."""
        return self.model_dump(by_alias=True, mode="json")
