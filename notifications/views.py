"""API views for the notification lifecycle.

Views validate input with pydantic, delegate to the NotificationService and
serialize results with the response schemas. Lifecycle exceptions
(not found, validation, store failures) propagate to the DRF exception
handler, which maps them to status codes.
"""

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from notifications.schemas.notification import (
    BulkCreateResponse,
    BulkNotificationRequest,
    ListNotificationsParams,
    MarkAllReadResponse,
    MessageResponse,
    NotificationCreateRequest,
    NotificationDetail,
    NotificationListResponse,
    NotificationStatsResponse,
    PaginationInfo,
    TemplateInfo,
    TemplateListResponse,
    UnreadCountResponse,
)
from notifications.services import health_service
from notifications.services.notification_service import (
    NotificationService,
    get_notification_service,
)
from notifications.services.notification_templates import list_templates

logger = structlog.get_logger(__name__)


def _bad_request(error: ValidationError) -> Response:
    """Build the 400 response for a request that failed schema validation."""
    return Response(
        {
            "error": "bad_request",
            "message": "Invalid request parameters",
            "errors": error.errors(include_url=False, include_context=False),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _detail(notification) -> dict:
    return NotificationDetail.model_validate(notification).to_response()


class NotificationAPIView(APIView):
    """Base view for notification endpoints.

    User ids are opaque values issued by the external identity provider and
    are not authenticated here. The lifecycle service can be injected with
    ``as_view(notification_service=...)``; otherwise the process-wide
    service is used.
    """

    authentication_classes: tuple = ()
    permission_classes = (AllowAny,)
    notification_service: NotificationService | None = None

    @property
    def service(self) -> NotificationService:
        """Lifecycle service used by this view."""
        return self.notification_service or get_notification_service()


class LivenessCheckView(APIView):
    """Liveness probe; never checks dependencies."""

    authentication_classes: tuple = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Return ``{"status": "alive"}``."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.to_response(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe.

    Returns 200 with a degraded status when the database or Redis is
    unavailable, so the service stays in rotation while they recover.
    """

    authentication_classes: tuple = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Return readiness with per-dependency health."""
        readiness = health_service.get_readiness_status()
        return Response(readiness.to_response(), status=status.HTTP_200_OK)


class NotificationCreateView(NotificationAPIView):
    """POST /notifications: create one notification from its type template."""

    def post(self, request):
        """Handle POST request to create a notification.

        Returns:
            201 Created with the stored notification
            400 Bad Request if userId or type is missing or a field is invalid
            500 Internal Server Error if the store fails
        """
        try:
            create_request = NotificationCreateRequest.model_validate(request.data)
        except ValidationError as e:
            logger.warning(
                "invalid_create_notification_request",
                validation_errors=e.errors(include_url=False, include_context=False),
            )
            return _bad_request(e)

        notification = self.service.create(
            create_request.user_id,
            create_request.type,
            create_request.custom_data,
            overrides=create_request.overrides(),
        )

        return Response(_detail(notification), status=status.HTTP_201_CREATED)


class BulkNotificationCreateView(NotificationAPIView):
    """POST /notifications/bulk: create one notification per user id."""

    def post(self, request):
        """Handle POST request to create notifications for many users.

        Returns:
            201 Created with ``{message, notifications}``
            400 Bad Request if userIds or type is missing or invalid
            500 Internal Server Error if the batch insert fails (nothing is
                created)
        """
        try:
            bulk_request = BulkNotificationRequest.model_validate(request.data)
        except ValidationError as e:
            logger.warning(
                "invalid_bulk_notification_request",
                validation_errors=e.errors(include_url=False, include_context=False),
            )
            return _bad_request(e)

        notifications = self.service.bulk_create(
            bulk_request.user_ids,
            bulk_request.type,
            bulk_request.custom_data,
            overrides=bulk_request.overrides(),
        )

        response = BulkCreateResponse(
            message=f"Created {len(notifications)} notification(s)",
            notifications=[
                NotificationDetail.model_validate(n) for n in notifications
            ],
        )
        return Response(response.to_response(), status=status.HTTP_201_CREATED)


class WelcomeNotificationView(NotificationAPIView):
    """POST /notifications/welcome/{userId}: greet a new user."""

    def post(self, _request, user_id: str):
        """Create the welcome notification for ``user_id``."""
        notification = self.service.create_welcome_notification(user_id)
        return Response(_detail(notification), status=status.HTTP_201_CREATED)


class TemplateListView(NotificationAPIView):
    """GET /notifications/templates: list every notification template."""

    def get(self, _request):
        """Return the template registry."""
        templates = [TemplateInfo.model_validate(t) for t in list_templates()]
        response = TemplateListResponse(templates=templates, count=len(templates))
        return Response(response.to_response(), status=status.HTTP_200_OK)


class NotificationResourceView(NotificationAPIView):
    """GET /notifications/{userId} and DELETE /notifications/{id}.

    Both routes share one path shape, so the path segment is a user id for
    GET and a notification id for DELETE.
    """

    def get(self, request, key: str):
        """List the user's active notifications, newest first.

        Query parameters: ``page``, ``limit``, ``unreadOnly``, ``type``,
        ``priority``, ``category``.

        Returns:
            200 OK with ``{notifications, pagination, unreadCount}``
            400 Bad Request if a query parameter is malformed
        """
        try:
            params = ListNotificationsParams.model_validate(
                request.query_params.dict()
            )
        except ValidationError as e:
            return _bad_request(e)

        page = self.service.list_notifications(
            key,
            page=params.page,
            page_size=params.limit,
            unread_only=params.unread_only,
            notification_type=params.type,
            priority=params.priority,
            category=params.category,
        )

        response = NotificationListResponse(
            notifications=[NotificationDetail.model_validate(n) for n in page.items],
            pagination=PaginationInfo(
                page=page.page, limit=page.limit, total=page.total, pages=page.pages
            ),
            unread_count=page.unread_count,
        )
        return Response(response.to_response(), status=status.HTTP_200_OK)

    def delete(self, _request, key: str):
        """Permanently delete the notification; 404 if it does not exist."""
        self.service.delete(key)
        response = MessageResponse(message="Notification deleted successfully")
        return Response(response.to_response(), status=status.HTTP_200_OK)


class UnreadCountView(NotificationAPIView):
    """GET /notifications/{userId}/unread-count."""

    def get(self, _request, user_id: str):
        """Return the number of active unread notifications."""
        response = UnreadCountResponse(count=self.service.unread_count(user_id))
        return Response(response.to_response(), status=status.HTTP_200_OK)


class NotificationStatsView(NotificationAPIView):
    """GET /notifications/{userId}/stats."""

    def get(self, _request, user_id: str):
        """Return active notification counts by type and by priority."""
        stats = self.service.stats(user_id)
        response = NotificationStatsResponse.model_validate(
            {"by_type": stats.by_type, "by_priority": stats.by_priority}
        )
        return Response(response.to_response(), status=status.HTTP_200_OK)


class MarkReadView(NotificationAPIView):
    """PATCH /notifications/{id}/read."""

    def patch(self, _request, notification_id: str):
        """Mark read; already-read notifications are returned unchanged."""
        notification = self.service.mark_read(notification_id)
        return Response(_detail(notification), status=status.HTTP_200_OK)


class MarkAllReadView(NotificationAPIView):
    """PATCH /notifications/{userId}/read-all."""

    def patch(self, _request, user_id: str):
        """Mark every active unread notification of the user read."""
        count = self.service.mark_all_read(user_id)
        response = MarkAllReadResponse(
            message=f"Marked {count} notification(s) as read", count=count
        )
        return Response(response.to_response(), status=status.HTTP_200_OK)


class ArchiveView(NotificationAPIView):
    """PATCH /notifications/{id}/archive."""

    def patch(self, _request, notification_id: str):
        """Archive the notification, hiding it from active listings."""
        notification = self.service.archive(notification_id)
        return Response(_detail(notification), status=status.HTTP_200_OK)
