"""
Structured logging for the Dreamboard backend.
structlog renders both its own events and stdlib records (SQLAlchemy, passlib)
so every line carries the same keys; JSON in production, console otherwise.
"""

import logging
import sys
from typing import Any, Optional

import structlog

from app.config import get_settings

settings = get_settings()

# Never rendered, whatever a caller binds
REDACTED_KEYS = frozenset({"password", "encoded_password", "plain_password"})


def redact_secrets(logger, method_name, event_dict):
    for key in REDACTED_KEYS & event_dict.keys():
        event_dict[key] = "***"
    return event_dict


def _renderer():
    if settings.ENVIRONMENT == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog and route the root logger through it."""
    shared_processors: list[Any] = [
        # request_id bound by session_scope()
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_secrets,
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(),
        ],
    ))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel((level or settings.LOG_LEVEL).upper())

    # passlib probes the bcrypt backend noisily at import time
    logging.getLogger("passlib").setLevel(logging.ERROR)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DB_ECHO else logging.WARNING)
