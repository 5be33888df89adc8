"""
Structured logging setup for applications embedding remote_mount

The library itself only calls ``structlog.get_logger()``. Applications call
``configure_logging()`` once at startup.
"""
import logging
from typing import Optional

import structlog

from remote_mount.config import settings


def configure_logging(log_level: Optional[str] = None):
    """
    Configure stdlib logging and structlog

    Args:
        log_level: Level name, defaults to REMOTE_MOUNT_LOG_LEVEL
    """
    log_level = (log_level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer() if log_level == "DEBUG" else structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
