"""
Structured logging for pkgdoc.

Manifesto:
    Template builds and render failures are the only interesting events in
    a rendering pipeline, and they are only useful with their context
    (template name, directory, elapsed time). structlog keeps that context
    as key/value pairs instead of formatted strings.

    - **Structures:** JSON output for log aggregation
    - **Flexes:** Colored console output for development, JSON for production
    - **Correlates:** Scoped context via ``LogContext``

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="pkgdoc")
            ↓
        structlog processor chain:
          1. TimeStamper (iso)
          2. add_log_level / add_logger_name
          3. add_service_metadata
          4. JSONRenderer (or ConsoleRenderer when stdout is a tty)

Examples:
    >>> from pkgdoc.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", service="pkgdoc")
    >>> logger = get_logger(__name__)
    >>> logger.info("template_set_built", templates=4)

Tags:
    logging, structlog, observability, pkgdoc
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_SERVICE_NAME = "pkgdoc"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "pkgdoc",
    add_timestamp: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
        stream: Sink for the stdlib handler (default stdout)
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stdout.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(template="pkg.html"):
            logger.info("render_started")
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "LogContext",
]
