"""Production server startup script for the notification service.

Entry point for running the Django application under Gunicorn in containers.
Worker and thread counts can be tuned with ``GUNICORN_WORKERS`` and
``GUNICORN_THREADS``.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the notification service using Gunicorn.

    - Binds to 0.0.0.0:$PORT (default 8000)
    - Logs access and errors to stdout/stderr for log aggregation
    - Keeps ``ENABLE_SCHEDULER`` off in multi-worker deployments unless a
      single worker should own housekeeping
    """
    sys.argv = [
        "gunicorn",
        "analytics_platform.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
