"""Delete notifications whose expiry timestamp has passed."""

from django.core.management.base import BaseCommand

from notifications.services.notification_service import get_notification_service


class Command(BaseCommand):
    """Expiry sweep: removes expired notifications, archived or not."""

    help = "Delete notifications past their expiry timestamp"

    def handle(self, *_args, **_options):
        """Run the sweep and report the number of deleted notifications."""
        deleted = get_notification_service().purge_expired()
        self.stdout.write(
            self.style.SUCCESS(f"Purged {deleted} expired notification(s)")
        )
