"""Django settings for the Analytics Platform notification service.

All deployment-specific values are read from environment variables so the
same image runs in development, staging and production.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


SECRET_KEY = os.getenv(
    "DJANGO_SECRET_KEY",
    "django-insecure-analytics-notifications-dev-key",
)

DEBUG = _env_bool("DJANGO_DEBUG", False)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "django_rq",
    "notifications",
]

MIDDLEWARE = [
    "notifications.middleware.RequestIDMiddleware",
    "notifications.middleware.ProcessTimeMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "notifications.middleware.SecurityHeadersMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "analytics_platform.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "analytics_platform.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("POSTGRES_DB", "analytics"),
        "USER": os.getenv("POSTGRES_USER", "analytics"),
        "PASSWORD": os.getenv("POSTGRES_PASSWORD", ""),
        "HOST": os.getenv("POSTGRES_HOST", "localhost"),
        "PORT": os.getenv("POSTGRES_PORT", "5432"),
        "CONN_MAX_AGE": int(os.getenv("POSTGRES_CONN_MAX_AGE", "60")),
    }
}

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": REDIS_URL,
    }
}

RQ_QUEUES = {
    "default": {
        "URL": REDIS_URL,
        "DEFAULT_TIMEOUT": 360,
    },
}

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": (
            "django.contrib.auth.password_validation."
            "UserAttributeSimilarityValidator"
        ),
    },
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Identity is delegated to the external provider; user ids arrive as opaque
# path/body values and are never checked against it here.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "notifications.exceptions.handlers.custom_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

# Structured logging (structlog) is configured by the notifications app
STRUCTURED_LOGGING = _env_bool("STRUCTURED_LOGGING", True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "logs/notification-service.log")

# Notification lifecycle
NOTIFICATION_EXPIRY_DAYS = int(os.getenv("NOTIFICATION_EXPIRY_DAYS", "30"))
NOTIFICATION_DEFAULT_PAGE_SIZE = int(os.getenv("NOTIFICATION_DEFAULT_PAGE_SIZE", "20"))
NOTIFICATION_MAX_PAGE_SIZE = int(os.getenv("NOTIFICATION_MAX_PAGE_SIZE", "100"))
NOTIFICATION_CLEANUP_DAYS = int(os.getenv("NOTIFICATION_CLEANUP_DAYS", "30"))
NOTIFICATIONS_ASYNC_DISPATCH = _env_bool("NOTIFICATIONS_ASYNC_DISPATCH", True)

# Housekeeping scheduler (expiry sweep + archived cleanup)
ENABLE_SCHEDULER = _env_bool("ENABLE_SCHEDULER", False)
NOTIFICATION_SWEEP_INTERVAL_MINUTES = int(
    os.getenv("NOTIFICATION_SWEEP_INTERVAL_MINUTES", "60")
)
NOTIFICATION_CLEANUP_HOUR = int(os.getenv("NOTIFICATION_CLEANUP_HOUR", "2"))
