"""URL configuration for the notification API.

Fixed paths (``bulk``, ``templates``, ``welcome/...``) are listed before the
parameterized ones so they are never captured as a user or notification id.
"""

from django.urls import path

from notifications import views

urlpatterns = [
    path("health/live", views.LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", views.ReadinessCheckView.as_view(), name="health-ready"),
    path(
        "notifications",
        views.NotificationCreateView.as_view(),
        name="notification-create",
    ),
    path(
        "notifications/bulk",
        views.BulkNotificationCreateView.as_view(),
        name="notification-bulk-create",
    ),
    path(
        "notifications/templates",
        views.TemplateListView.as_view(),
        name="notification-templates",
    ),
    path(
        "notifications/welcome/<str:user_id>",
        views.WelcomeNotificationView.as_view(),
        name="notification-welcome",
    ),
    path(
        "notifications/<str:user_id>/unread-count",
        views.UnreadCountView.as_view(),
        name="notification-unread-count",
    ),
    path(
        "notifications/<str:user_id>/stats",
        views.NotificationStatsView.as_view(),
        name="notification-stats",
    ),
    path(
        "notifications/<str:user_id>/read-all",
        views.MarkAllReadView.as_view(),
        name="notification-mark-all-read",
    ),
    path(
        "notifications/<str:notification_id>/read",
        views.MarkReadView.as_view(),
        name="notification-mark-read",
    ),
    path(
        "notifications/<str:notification_id>/archive",
        views.ArchiveView.as_view(),
        name="notification-archive",
    ),
    path(
        "notifications/<str:key>",
        views.NotificationResourceView.as_view(),
        name="notification-resource",
    ),
]
