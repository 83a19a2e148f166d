"""Thread-local request context used to correlate log lines."""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Store the request ID for the current thread.

    Args:
        request_id: The unique request identifier to store.
    """
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the request ID for the current thread, or None if unset."""
    return getattr(_request_context, "request_id", None)


def clear_request_id() -> None:
    """Forget the request ID once the request has been served."""
    if hasattr(_request_context, "request_id"):
        delattr(_request_context, "request_id")
