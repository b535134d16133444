"""Structlog-based logging configuration for zoo intake.

Diagnostics go to stderr so they never interleave with the report echoed on
stdout. Output is human-readable by default and JSON lines when
``logging.json_logs`` is set.
"""

import logging
import sys

import structlog

from zoointake.config.models import ZooConfig


def _configure_processors(config: ZooConfig) -> list:
    """Configure structlog processors from the logging settings."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    # Add caller info if requested
    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    if config.logging.json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def _configure_handlers(config: ZooConfig) -> None:
    """Route the root logger to a single stderr handler."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(stderr_handler)


def configure_structlog(config: ZooConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The ZooConfig instance containing logging settings.
    """
    processors = _configure_processors(config)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Structured logging configured",
        log_level=config.logging.level,
        json_output=config.logging.json_logs,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)
