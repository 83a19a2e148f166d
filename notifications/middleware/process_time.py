"""Process time middleware for performance monitoring."""

import time
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

import structlog

from notifications.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = structlog.get_logger(__name__)


class ProcessTimeMiddleware:
    """Add ``X-Process-Time`` to responses and warn about slow requests."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Time the request and annotate the response."""
        start_time = time.perf_counter()

        response = self.get_response(request)

        duration = time.perf_counter() - start_time
        response[PROCESS_TIME_HEADER] = f"{duration:.6f}"

        if duration > SLOW_REQUEST_THRESHOLD:
            logger.warning(
                "slow_request",
                method=request.method,
                path=request.path,
                duration_seconds=round(duration, 3),
                threshold_seconds=SLOW_REQUEST_THRESHOLD,
            )

        return response
