"""Health status enumeration."""

from enum import Enum


class HealthStatus(str, Enum):
    """Health status of a dependency."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    ERROR = "error"
