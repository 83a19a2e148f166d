"""Health check schemas."""

from notifications.schemas.health.dependency_health import DependencyHealth
from notifications.schemas.health.liveness_response import LivenessResponse
from notifications.schemas.health.readiness_response import ReadinessResponse

__all__ = ["DependencyHealth", "LivenessResponse", "ReadinessResponse"]
