"""Structured logging setup for the analysis service.

structlog renders JSON lines in deployed environments and a readable console
format in development. Request-scoped fields (symbol, bar count) are carried
through contextvars so engine log events pick them up without the engine
knowing about requests.
"""
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


def configure_structured_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines; False switches to the console renderer
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@contextmanager
def analysis_log_context(symbol: str | None, bar_count: int) -> Iterator[None]:
    """Bind the analyzed series to every log event emitted inside the block."""
    with structlog.contextvars.bound_contextvars(symbol=symbol, bar_count=bar_count):
        yield


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        BoundLogger instance for structured logging
    """
    return structlog.get_logger(name)
