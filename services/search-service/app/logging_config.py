"""
Logging configuration for catalog search.

Routes structlog events through stdlib logging with a shared processor chain.
JSON output for log aggregation, console output for development.

The host application calls configure_from_settings() once at startup, before
the first search is served. The search modules only obtain loggers.
"""

import logging
import sys

import structlog

from .config import settings


def configure_logging(log_level: str = "INFO", use_json: bool = False) -> None:
    """
    Configure structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_json: Render events as JSON instead of human-readable lines
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_from_settings() -> None:
    """Configure logging from application settings."""
    configure_logging(log_level=settings.LOG_LEVEL, use_json=settings.LOG_JSON)
    structlog.get_logger(settings.SERVICE_NAME).debug(
        "logging_configured", level=settings.LOG_LEVEL, json=settings.LOG_JSON
    )
