"""Admin registration for notifications."""

from django.contrib import admin

from notifications.models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """Read-mostly view of stored notifications for support staff."""

    list_display = (
        "notification_id",
        "user_id",
        "type",
        "priority",
        "is_read",
        "is_archived",
        "created_at",
        "expires_at",
    )
    list_filter = ("type", "priority", "category", "is_read", "is_archived")
    search_fields = ("user_id", "title", "message")
    readonly_fields = ("notification_id", "created_at", "updated_at")
    ordering = ("-created_at",)
