"""Structured logging configuration.

structlog on top of stdlib logging, rendered as JSON lines (or colored
console output for local runs). Request-scoped context such as request_id
is merged into every event via structlog.contextvars.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

from balance_api.config import Settings

# uvicorn logs through these; route them into our handler instead of its own
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _add_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add ISO 8601 UTC timestamp with timezone offset."""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call more than once (every ``create_app`` call does); the last
    call wins.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Any
    if settings.log_json:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = settings.log_level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                    "foreign_pre_chain": shared_processors,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "structured",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "": {"handlers": ["default"], "level": level},
                **{
                    name: {"handlers": [], "level": level, "propagate": True}
                    for name in _UVICORN_LOGGERS
                },
            },
        }
    )


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger.

    Example:
        logger = get_logger(__name__)
        logger.info("balance_served", currency="USD")
        # {"event": "balance_served", "currency": "USD", "level": "info", ...}
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
