"""WSGI config for the Analytics Platform notification service.

Exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "analytics_platform.settings")

application = get_wsgi_application()
