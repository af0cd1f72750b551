"""Structured logging for guarded.

Failed assertions and failing cleanups are logged through structlog under the
``guarded`` logger hierarchy. Each event carries the context needed to find it
in a test run: the sink that received a failure and the assertion's call site,
or the cleanup callable that raised.

configure_logging() gives the ``guarded`` logger its own handler and stops it
propagating, so the test run's root logging setup is left untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from guarded.errors import SourceLocation

if TYPE_CHECKING:
    from collections.abc import Callable

    from guarded.reporting import FailureSink

__all__ = [
    'LOGGER_NAME',
    'cleanup_logger',
    'configure_logging',
    'failure_logger',
    'get_logger',
]

LOGGER_NAME = 'guarded'


def _render_locations(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Render SourceLocation values as ``file:line in function``."""
    for key, value in event_dict.items():
        if isinstance(value, SourceLocation):
            event_dict[key] = str(value)
    return event_dict


def _get_shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> logging.Logger:
    """Route guarded's events to stderr as JSON or console lines.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.

    Returns:
        The configured ``guarded`` stdlib logger.
    """
    structlog.configure(
        processors=[
            *_get_shared_processors(),
            _render_locations,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_get_shared_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger inside the ``guarded`` hierarchy."""
    return structlog.get_logger(name or LOGGER_NAME)


def failure_logger(sink: FailureSink, location: SourceLocation | None) -> Any:
    """Logger bound with the sink receiving a failure and the assertion's call site."""
    return get_logger(f'{LOGGER_NAME}.assertions').bind(sink=type(sink).__name__, location=location)


def cleanup_logger(cleanup: Callable[[], object]) -> Any:
    """Logger bound with the name of a cleanup callable."""
    name = getattr(cleanup, '__qualname__', None) or repr(cleanup)
    return get_logger(f'{LOGGER_NAME}.execution').bind(cleanup=name)
