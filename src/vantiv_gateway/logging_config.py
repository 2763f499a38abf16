"""structlog setup for applications embedding the gateway.

The gateway itself only calls `structlog.get_logger(__name__)`; it never
configures logging on import. Applications call `configure_logging()`
once at startup.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor

from vantiv_gateway.config import settings
from vantiv_gateway.scrub import scrub

# Event keys that may hold raw request/response XML
TRANSCRIPT_KEYS = ("request_xml", "response_xml")


def scrub_transcripts(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Redact card, account and credential values from logged XML transcripts."""
    for key in TRANSCRIPT_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = scrub(value)
    return event_dict


SHARED_PROCESSORS: tuple[Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    scrub_transcripts,
)


def configure_logging(
    log_level: Optional[str] = None,
    format_as_json: Optional[bool] = None,
) -> None:
    """
    Route structlog through stdlib logging on stdout.

    Transcript scrubbing runs before the renderer, so XML logged under
    `request_xml` or `response_xml` never reaches a handler unredacted.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: VANTIV_LOG_LEVEL)
        format_as_json: JSON lines when True, console output when False
            (default: VANTIV_LOG_JSON)
    """
    level_name = (log_level or settings.log_level).upper()
    as_json = settings.log_json if format_as_json is None else format_as_json

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name),
    )

    renderer: Processor = (
        structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger bound to `name`.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        structlog logger that uses the configuration from `configure_logging`
    """
    return structlog.get_logger(name)
