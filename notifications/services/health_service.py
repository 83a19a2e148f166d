"""Health check service with short-lived result caching."""

import time
from collections.abc import Callable

from django.core.cache import cache
from django.db import connection
from django.db.utils import OperationalError

import structlog

from notifications.enums import HealthStatus
from notifications.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = structlog.get_logger(__name__)

_REDIS_PROBE_KEY = "__notification_health_check__"


class HealthService:
    """Liveness and readiness checks for the database and Redis."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cache: dict[str, tuple[float, DependencyHealth]] = {}

    def get_liveness_status(self) -> LivenessResponse:
        """Liveness never touches dependencies."""
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with database and Redis health checks.

        The service reports degraded (still ready) when a dependency is down
        so that it stays in rotation while the dependency recovers.
        """
        dependencies = {
            "database": self.check_database_health(),
            "redis": self.check_redis_health(),
        }
        degraded = not all(dep.healthy for dep in dependencies.values())

        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            dependencies=dependencies,
        )

    def check_database_health(self) -> DependencyHealth:
        """Validate the database connection without running a query."""
        return self._cached("database", self._probe_database)

    def check_redis_health(self) -> DependencyHealth:
        """Round-trip a key through the Redis-backed cache."""
        return self._cached("redis", self._probe_redis)

    def _cached(
        self, name: str, probe: Callable[[], DependencyHealth]
    ) -> DependencyHealth:
        now = time.time()
        cached = self._cache.get(name)
        if cached is not None and (now - cached[0]) < self.cache_ttl_seconds:
            return cached[1]

        health = probe()
        previous = cached[1] if cached else None
        if previous is not None and previous.healthy != health.healthy:
            logger.info(
                "dependency_health_changed",
                dependency=name,
                healthy=health.healthy,
                message=health.message,
            )

        self._cache[name] = (now, health)
        return health

    @staticmethod
    def _probe_database() -> DependencyHealth:
        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
            status, healthy = HealthStatus.HEALTHY, True
            message = "Database connection successful"
        except OperationalError as e:
            status, healthy = HealthStatus.UNHEALTHY, False
            message = f"Database connection failed: {e!s}"
        except Exception as e:
            status, healthy = HealthStatus.ERROR, False
            message = f"Unexpected error checking database: {e!s}"
            logger.warning("database_health_check_error", error=str(e))

        return DependencyHealth(
            healthy=healthy,
            status=status,
            message=message,
            response_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    @staticmethod
    def _probe_redis() -> DependencyHealth:
        start_time = time.perf_counter()
        try:
            cache.set(_REDIS_PROBE_KEY, "ok", timeout=1)
            if cache.get(_REDIS_PROBE_KEY) == "ok":
                status, healthy = HealthStatus.HEALTHY, True
                message = "Redis connection successful"
            else:
                status, healthy = HealthStatus.UNHEALTHY, False
                message = "Redis health check failed: unexpected result"
        except Exception as e:
            status, healthy = HealthStatus.ERROR, False
            message = f"Redis connection failed: {e!s}"
            logger.warning("redis_health_check_error", error=str(e))

        return DependencyHealth(
            healthy=healthy,
            status=status,
            message=message,
            response_time_ms=(time.perf_counter() - start_time) * 1000,
        )


# Global health service instance
health_service = HealthService()
