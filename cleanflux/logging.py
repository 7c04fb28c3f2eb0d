"""
Logging setup for the CleanFlux SDK.

SDK modules log through structlog bound to standard library loggers under the
``cleanflux`` namespace. Nothing is emitted unless the host application
enables that logger, either through its own logging config or by calling
configure_logging().
"""

import logging
import sys
from typing import Any

import structlog

ROOT_LOGGER_NAME = "cleanflux"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> Any:
    """Get a structlog logger backed by the stdlib logger of the same name."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Route SDK log events to stderr.

    Args:
        level: Minimum level for the ``cleanflux`` logger (e.g. "DEBUG")
        json_logs: Render events as JSON lines instead of console text
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
    sdk_logger.setLevel(log_level)
    sdk_logger.handlers.clear()
    sdk_logger.addHandler(handler)
    sdk_logger.propagate = False

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
