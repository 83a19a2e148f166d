"""Exceptions raised by the notification lifecycle."""


class NotificationError(Exception):
    """Base exception for notification lifecycle errors."""

    status_code = 500

    def __init__(self, message: str, detail: str | None = None):
        """Initialize notification error.

        Args:
            message: Error message
            detail: Additional details about the error
        """
        self.detail = detail
        super().__init__(message)


class NotificationValidationError(NotificationError):
    """Caller omitted or malformed a required field (400)."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None):
        """Initialize validation error.

        Args:
            message: Error message
            field: Name of the offending field, if any
        """
        self.field = field
        super().__init__(message, detail=f"Invalid field: {field}" if field else None)


class NotificationNotFoundError(NotificationError):
    """Referenced notification does not exist (404)."""

    status_code = 404

    def __init__(self, notification_id: str):
        """Initialize not found error.

        Args:
            notification_id: ID of the notification that was not found
        """
        self.notification_id = notification_id
        super().__init__(f"Notification with ID {notification_id} not found")


class NotificationStoreError(NotificationError):
    """Underlying persistence failure (500)."""

    status_code = 500

    def __init__(self, operation: str, error: Exception):
        """Initialize store error.

        Args:
            operation: Repository operation that failed
            error: The original database error
        """
        self.operation = operation
        self.original_error = error
        super().__init__(
            f"Notification store failed during {operation}",
            detail=str(error),
        )


class NotificationClientError(NotificationError):
    """Notification API returned an unexpected error response."""

    def __init__(self, message: str, status_code: int | None = None):
        """Initialize client error.

        Args:
            message: Error message
            status_code: HTTP status code returned by the API, if any
        """
        super().__init__(message)
        self.status_code = status_code
