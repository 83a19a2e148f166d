"""Delete archived notifications older than a retention window."""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from notifications.constants import DEFAULT_CLEANUP_DAYS
from notifications.exceptions import NotificationValidationError
from notifications.services.notification_service import get_notification_service


class Command(BaseCommand):
    """Archived cleanup, independent of the expiry sweep."""

    help = "Delete archived notifications created more than --days days ago"

    def add_arguments(self, parser):
        """Register the retention window option."""
        parser.add_argument(
            "--days",
            type=int,
            default=getattr(
                settings, "NOTIFICATION_CLEANUP_DAYS", DEFAULT_CLEANUP_DAYS
            ),
            help="Retention window in days (default: NOTIFICATION_CLEANUP_DAYS)",
        )

    def handle(self, *_args, **options):
        """Run the cleanup and report the number of deleted notifications."""
        try:
            deleted = get_notification_service().cleanup(options["days"])
        except NotificationValidationError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(
            self.style.SUCCESS(
                f"Deleted {deleted} archived notification(s) "
                f"older than {options['days']} day(s)"
            )
        )
