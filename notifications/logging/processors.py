"""Custom structlog processors for request context and service metadata."""

import os
import threading

from colorama import Fore, Style, init
from structlog.typing import EventDict, WrappedLogger

from notifications.logging.context import get_request_id

init(autoreset=True)

DEFAULT_SERVICE_NAME = "analytics-notification-service"

_LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

# Shown in the JSON file output only
_CONSOLE_EXCLUDED_FIELDS = {
    "level",
    "timestamp",
    "request_id",
    "logger",
    "event",
    "process_id",
    "thread_id",
    "service_name",
    "environment",
}


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach the current request ID (set by RequestIDMiddleware), if any."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach service name and deployment environment."""
    event_dict["service_name"] = os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME)
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach process and thread ids, useful under multi-worker Gunicorn."""
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render an event as a single colored console line.

    Format: ``[LEVEL] timestamp | request_id | logger_name | event key=value...``

    Args:
        _logger: The wrapped logger instance (unused).
        _method_name: The name of the method called on the logger (unused).
        event_dict: The event dictionary to be logged.

    Returns:
        A formatted, colored string for console output.
    """
    level = event_dict.get("level", "INFO").upper()
    level_color = _LEVEL_COLORS.get(level, Fore.WHITE)

    formatted = (
        f"{level_color}[{level:<8}]{Style.RESET_ALL} "
        f"{Fore.WHITE}{event_dict.get('timestamp', '')}{Style.RESET_ALL} | "
        f"{Fore.MAGENTA}{event_dict.get('request_id', 'no-request-id')}"
        f"{Style.RESET_ALL} | "
        f"{Fore.BLUE}{event_dict.get('logger', 'root')}{Style.RESET_ALL} | "
        f"{event_dict.get('event', '')}"
    )

    extra_fields = {
        k: v for k, v in event_dict.items() if k not in _CONSOLE_EXCLUDED_FIELDS
    }
    if extra_fields:
        extra_str = " ".join(f"{k}={v}" for k, v in extra_fields.items())
        formatted += f" {Fore.YELLOW}{extra_str}{Style.RESET_ALL}"

    return formatted
