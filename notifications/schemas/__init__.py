"""Pydantic schemas for request validation and response serialization."""

from notifications.schemas.base_schema_model import BaseSchemaModel

__all__ = ["BaseSchemaModel"]
