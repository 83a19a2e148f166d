"""Schema for creating a single notification."""

from pydantic import Field

from notifications.constants import USER_ID_MAX_LENGTH
from notifications.schemas.notification.notification_fields import (
    NotificationFields,
)


class NotificationCreateRequest(NotificationFields):
    """Request body for POST /notifications."""

    user_id: str = Field(
        ...,
        min_length=1,
        max_length=USER_ID_MAX_LENGTH,
        description="Owning user id",
    )
