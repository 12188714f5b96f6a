"""Structured logging configuration for word-interop-mcp.

Every record is a single JSON object on stderr carrying the event name, the
emitting module, level, ISO timestamp and a "service" field, so output from
several MCP servers sharing one client log can be told apart. stdout is never
written to: it carries the stdio MCP transport.

The level comes from WORD_MCP_LOG_LEVEL (default INFO).
"""

import logging
import os
import sys
from typing import Optional

import structlog

SERVICE_NAME = "word-interop-mcp"
LOG_LEVEL_ENV = "WORD_MCP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def add_service_name(logger, method_name, event_dict):
    """structlog processor tagging each record with the server name."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Safe to call again (e.g. to change the level); the stdlib handler is
    replaced rather than duplicated.

    Args:
        level: Log level name. Falls back to WORD_MCP_LOG_LEVEL, then INFO.
               Unknown names fall back to INFO.
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_service_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


configure_logging()
