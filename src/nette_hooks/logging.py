"""Logging configuration using structlog."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog

# Maximum size for the hook log before rotation (1 MB)
LOG_MAX_BYTES = 1_048_576

_handler: logging.Handler | None = None


def _install_handler(handler: logging.Handler) -> None:
    """Replace the handler installed by a previous configure_logging call."""
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()
    root.addHandler(handler)
    _handler = handler


def configure_logging(
    log_level: str = "WARNING",
    log_format: str = "json",
    log_file: Path | None = None,
) -> None:
    """Configure structlog for hooks and the CLI.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" for JSON lines, "console" for human-readable)
        log_file: Rotated file to log to; stderr when None
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    # Hooks own stdout and stderr, so they log to a file instead.
    handler: logging.Handler
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=1,
                encoding="utf-8",
                delay=True,
            )
        except OSError:
            handler = logging.NullHandler()
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter("%(message)s"))
    _install_handler(handler)
    logging.getLogger().setLevel(numeric_level)
    # Write failures must not surface on the hook's stderr.
    logging.raiseExceptions = log_file is None

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "console":
        processors.extend([
            structlog.dev.ConsoleRenderer(colors=False),
        ])
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
