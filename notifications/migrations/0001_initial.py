import uuid

from django.db import migrations, models

import notifications.models.notification


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                (
                    "notification_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the notification",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "user_id",
                    models.CharField(
                        help_text="Owning user id from the identity provider",
                        max_length=255,
                    ),
                ),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("welcome", "welcome"),
                            ("file_upload", "file_upload"),
                            ("chart_download", "chart_download"),
                            ("chart_save", "chart_save"),
                            ("chart_delete", "chart_delete"),
                            ("profile_update", "profile_update"),
                            ("system_update", "system_update"),
                            ("security_alert", "security_alert"),
                            ("data_export", "data_export"),
                            ("analysis_complete", "analysis_complete"),
                            ("error", "error"),
                            ("info", "info"),
                            ("success", "success"),
                            ("warning", "warning"),
                        ],
                        help_text="Event type that selected the template",
                        max_length=32,
                    ),
                ),
                ("title", models.CharField(max_length=100)),
                ("message", models.CharField(max_length=500)),
                ("icon", models.CharField(default="🔔", max_length=16)),
                (
                    "priority",
                    models.CharField(
                        choices=[
                            ("low", "low"),
                            ("medium", "medium"),
                            ("high", "high"),
                            ("urgent", "urgent"),
                        ],
                        default="medium",
                        max_length=10,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("system", "system"),
                            ("user_action", "user_action"),
                            ("security", "security"),
                            ("update", "update"),
                            ("error", "error"),
                        ],
                        default="user_action",
                        max_length=20,
                    ),
                ),
                (
                    "metadata",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Caller-supplied context for the notification",
                    ),
                ),
                ("is_read", models.BooleanField(default=False)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                ("is_archived", models.BooleanField(default=False)),
                ("archived_at", models.DateTimeField(blank=True, null=True)),
                (
                    "expires_at",
                    models.DateTimeField(
                        default=notifications.models.notification.default_expires_at
                    ),
                ),
                (
                    "action_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                (
                    "action_text",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "notifications",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["user_id", "-created_at"],
                        name="notif_user_created_idx",
                    ),
                    models.Index(
                        fields=["user_id", "is_read"], name="notif_user_read_idx"
                    ),
                    models.Index(fields=["type"], name="notif_type_idx"),
                    models.Index(fields=["priority"], name="notif_priority_idx"),
                    models.Index(fields=["expires_at"], name="notif_expires_idx"),
                ],
            },
        ),
    ]
