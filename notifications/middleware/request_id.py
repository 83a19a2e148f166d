"""Request ID middleware for log correlation."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from notifications.constants import REQUEST_ID_HEADER
from notifications.logging.context import clear_request_id, set_request_id


class RequestIDMiddleware:
    """Propagate or mint an ``X-Request-ID`` for every request.

    The id is stored in thread-local storage so structlog processors can add
    it to every event, exposed on ``request.request_id`` and echoed on the
    response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Attach the request ID, call the next handler, and echo the header."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_id()
