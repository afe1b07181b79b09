"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from chapa_client.config import ChapaSettings

# Keys that must never reach a log sink.
SENSITIVE_KEYS = frozenset({"authorization", "secret_key", "headers"})


def drop_sensitive_keys(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Strip credential-bearing keys from log events."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict.pop(key)
    return event_dict


def build_processors(format_as_json: bool = True) -> list[Processor]:
    """Return the processor chain used for client log events."""
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if format_as_json
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        # Scrub before rendering so nothing downstream sees the secret
        drop_sensitive_keys,
        renderer,
    ]


def configure_logging(
    log_level: str = "INFO",
    format_as_json: bool = True,
) -> None:
    """
    Configure structured logging for applications using the client.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_as_json: If True, output logs as JSON; otherwise use console format
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    structlog.configure(
        processors=build_processors(format_as_json),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: ChapaSettings | None = None) -> None:
    """Configure logging from CHAPA_LOG_LEVEL / CHAPA_LOG_JSON settings."""
    settings = settings or ChapaSettings()
    configure_logging(log_level=settings.log_level, format_as_json=settings.log_json)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to ``name``."""
    return structlog.get_logger(name)
