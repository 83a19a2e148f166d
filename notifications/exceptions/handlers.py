"""DRF exception handler for the notification API."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from notifications.exceptions.notification_exceptions import (
    NotificationError,
    NotificationValidationError,
)
from notifications.logging.context import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."

# Lifecycle errors whose message is safe to show to the caller
_CLIENT_ERROR_STATUSES = frozenset(
    {status.HTTP_400_BAD_REQUEST, status.HTTP_404_NOT_FOUND}
)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Translate lifecycle and framework exceptions into JSON error responses.

    DRF exceptions (including ``Http404``) keep DRF's body. Lifecycle errors
    use their ``status_code``; everything else, including store failures,
    becomes a generic 500. Lifecycle error bodies have the shape
    ``{status, message, request_id, timestamp}``, and validation errors add
    ``detail``.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else context.get("request")
    request_id = get_request_id()

    response = exception_handler(exc, context)
    if response is None:
        response = _lifecycle_error_response(exc, request_id)

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response.status_code)

    return response


def _lifecycle_error_response(exc: Exception, request_id: str | None) -> Response:
    status_code = exc.status_code if isinstance(exc, NotificationError) else None
    if status_code not in _CLIENT_ERROR_STATUSES:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    body: dict[str, Any] = {
        "status": status_code,
        "message": (
            str(exc)
            if status_code != status.HTTP_500_INTERNAL_SERVER_ERROR
            else INTERNAL_ERROR_MESSAGE
        ),
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if isinstance(exc, NotificationValidationError):
        body["detail"] = exc.detail

    return Response(body, status=status_code)


def _log_exception(exc: Exception, request: Any, status_code: int) -> None:
    """Log the failure; 4xx as warnings, everything else as errors."""
    log_level = logging.WARNING if 400 <= status_code < 500 else logging.ERROR

    method = getattr(request, "method", "unknown")
    path = getattr(request, "path", "unknown")
    log_message = f"{type(exc).__name__} on {method} {path} -> {status_code}: {exc}"

    if isinstance(exc, NotificationError) and exc.detail:
        log_message += f" ({exc.detail})"

    if settings.DEBUG and not isinstance(exc, (Http404, APIException)):
        log_message += "\n" + "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )

    logger.log(log_level, log_message)
