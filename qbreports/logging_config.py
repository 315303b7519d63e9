"""
Structured logging setup.

Configures structlog on top of the stdlib logging module so parser events are
emitted as JSON (or a console rendering for local use).
"""
import logging
import sys
from typing import Any, Optional

import structlog

from qbreports.config import get_settings

# Values longer than this are cut before rendering (cell dumps, header text)
MAX_VALUE_LENGTH = 500


def truncate_long_values_processor(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Structlog processor that shortens oversized string values."""
    for key, value in event_dict.items():
        if key == "event":
            continue
        if isinstance(value, str) and len(value) > MAX_VALUE_LENGTH:
            event_dict[key] = value[:MAX_VALUE_LENGTH] + "..."
    return event_dict


def configure_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name; defaults to the configured ``log_level``.
        json_logs: Render JSON when True, console output otherwise.
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    if json_logs is None:
        json_logs = settings.json_logs

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            truncate_long_values_processor,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
