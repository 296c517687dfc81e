"""
Structured logging setup.

Wires the stdlib root logger and structlog together so every
``structlog.get_logger(__name__)`` in the service renders consistently.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from shared.config import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog and stdlib logging.

    Args:
        settings: Application settings (log level and format)
    """
    level = getattr(logging, settings.log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    logging.basicConfig(format="%(message)s", level=level, handlers=[handler], force=True)

    renderer: Processor
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
