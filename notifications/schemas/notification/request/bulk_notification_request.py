"""Schema for creating the same notification for many users."""

from typing import Annotated

from pydantic import Field, StringConstraints

from notifications.constants import USER_ID_MAX_LENGTH
from notifications.schemas.notification.notification_fields import (
    NotificationFields,
)

UserId = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=1, max_length=USER_ID_MAX_LENGTH
    ),
]


class BulkNotificationRequest(NotificationFields):
    """Request body for POST /notifications/bulk."""

    user_ids: list[UserId] = Field(
        ...,
        min_length=1,
        description="Recipients; duplicates are collapsed",
    )
