from __future__ import annotations

import logging
import logging.handlers
import sys
from typing import IO, Any

import structlog

from beancount_shorthand.infrastructure.config.settings import BaseAppSettings, get_settings


def _resolve_level(level_name: str) -> int:
    """Return logging level from name with fallback to INFO."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(stream: IO[str] | None = None, settings: BaseAppSettings | None = None) -> None:
    """Initialize structlog + stdlib logging for console or JSON rendering.

    - stdout handler, or a size-rotating file handler when LOG_FILE is set
    - contextvars merged; ISO timestamp, level and logger name added
    - JSON vs console renderer chosen by settings.json_logs
    - force=True so repeated calls (tests, CLI re-entry) do not stack handlers

    stream: optional text stream for the console handler (defaults to sys.stdout).
    """
    settings = settings or get_settings()
    if not settings.logging_enabled:
        logging.basicConfig(handlers=[], level=logging.CRITICAL, force=True)
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            cache_logger_on_first_use=False,
        )
        return
    level_value = _resolve_level(settings.log_level)

    timestamper = structlog.processors.TimeStamper(fmt="iso")
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    if settings.json_logs:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    handler: logging.Handler
    if settings.log_file:
        handler = logging.handlers.RotatingFileHandler(
            filename=settings.log_file,
            maxBytes=max(1024, settings.log_max_bytes),
            backupCount=max(1, settings.log_backup_count),
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=pre_chain,
        )
    )

    logging.basicConfig(handlers=[handler], level=level_value, force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,  # type: ignore[arg-type]
        # module-level loggers must pick up reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "beancount_shorthand") -> structlog.BoundLogger:
    """Return a structured logger; configuration happens in configure_logging."""
    return structlog.get_logger(name)
