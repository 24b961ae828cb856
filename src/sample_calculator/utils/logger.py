"""Structured logging configuration built on structlog.

Every component logger wraps a standard library logger under the
``sample_calculator`` namespace. Until :func:`configure_logging` runs, the
standard library decides what is emitted: warnings and above reach stderr
through its last-resort handler and nothing is ever written to stdout, which
stays reserved for command results and the classifier report.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from sample_calculator.utils.settings import get_settings

ROOT_LOGGER_NAME = "sample_calculator"

if TYPE_CHECKING:
    from sample_calculator.utils.settings import LoggingSettings


def _select_renderer(log_format: str) -> Any:
    """Return the final structlog processor for the requested format."""
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.KeyValueRenderer(
        key_order=["timestamp", "level", "event"],
    )


def _build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file_path:
        log_path = Path(settings.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        settings: Logging settings to apply. Defaults to the global settings.

    """
    active = settings or get_settings()
    level = getattr(logging, active.log_level)

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=_build_handlers(active),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _select_renderer(active.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, optionally bound to a component name."""
    stdlib_name = f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME
    logger = structlog.wrap_logger(logging.getLogger(stdlib_name))
    if name:
        return logger.bind(component=name)
    return logger
