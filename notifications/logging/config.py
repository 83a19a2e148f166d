"""Structlog setup: JSON lines to a rotating file, colored lines to the console."""

import logging
import logging.handlers
from pathlib import Path

from django.conf import settings

import structlog

from notifications.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)

MAX_LOG_FILE_BYTES = 50 * 1024 * 1024
LOG_BACKUP_COUNT = 20

# Applied to structlog events and to records from Django, rq and apscheduler
_PRE_CHAIN = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    add_request_context,
]


def _file_handler(log_file_path: str) -> logging.Handler:
    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=MAX_LOG_FILE_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[*_PRE_CHAIN, add_service_context, add_process_info],
        )
    )
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer, foreign_pre_chain=_PRE_CHAIN
        )
    )
    return handler


def setup_logging() -> None:
    """Route structlog and stdlib logging through the notification formatters.

    Reads ``LOG_LEVEL`` and ``LOG_FILE_PATH`` from Django settings. An empty
    ``LOG_FILE_PATH`` disables the JSON file, leaving console output only.
    """
    level_name = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level, level_name = logging.INFO, "INFO"
    log_file_path = getattr(settings, "LOG_FILE_PATH", "")

    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers = [_console_handler()]
    if log_file_path:
        handlers.append(_file_handler(log_file_path))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_file=log_file_path or None,
        log_level=level_name,
    )
